import argparse
import logging
import sys
from os import path

import coloredlogs

from ircgen import commands
from ircgen import config
from ircgen import generator

DEFAULT_CONFIG = "ircgen.conf"
OMITTED = "-"


def load_generator(config_filename, prefix=None):
  if config_filename is None:
    if path.isfile(DEFAULT_CONFIG):
      config_filename = DEFAULT_CONFIG

  if config_filename is not None:
    gen = generator.Generator.from_config_file(config_filename)
  else:
    gen = generator.Generator()

  if prefix is not None:
    gen.set_prefix(prefix)

  return gen


def write_line(line):
  if isinstance(line, bytes):
    sys.stdout.buffer.write(line)
  else:
    sys.stdout.write(line)
  sys.stdout.flush()


def main(argv=None):
  parser = argparse.ArgumentParser(
      prog="ircgen",
      description="Render one IRC or CTCP message. Pass -- before arguments "
                  "that start with a dash.",
      formatter_class=argparse.ArgumentDefaultsHelpFormatter)
  parser.add_argument("--config", "-c",
                      help="file to load configuration from (default: {}, "
                           "if present)".format(DEFAULT_CONFIG))
  parser.add_argument("--prefix", "-p",
                      help="prefix to send the message on behalf of")
  parser.add_argument("--verbose", "-v", help="enable verbose (debug) logging",
                      action="store_true", default=False)
  parser.add_argument("operation", help="operation name or IRC command")
  parser.add_argument("params", nargs="*",
                      help="operation arguments, {} to omit one".format(
                          OMITTED))

  args = parser.parse_args(argv)

  coloredlogs.install(level=logging.DEBUG if args.verbose else logging.INFO)

  params = [None if param == OMITTED else param for param in args.params]

  try:
    gen = load_generator(args.config, args.prefix)
  except (OSError, config.ParseError) as e:
    logging.fatal("Could not load configuration file, aborting.")
    logging.fatal(e)
    return 1

  try:
    operation = commands.get(args.operation)
  except commands.UnknownOperation:
    logging.fatal("Unknown operation: {}".format(args.operation))
    return 1

  try:
    operation.signature.bind(gen, *params)
  except TypeError as e:
    logging.fatal("Bad arguments for {}{}: {}".format(
        operation.name, operation.signature, e))
    return 1

  write_line(getattr(gen, operation.name)(*params))
  return 0
