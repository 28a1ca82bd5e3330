from ircgen.generator import Generator

__version__ = "0.1.0"


def main():
  from ircgen import cli
  return cli.main()
