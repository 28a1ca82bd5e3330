import regex

from ircgen import config


PREFIX_REGEX = regex.compile(r"^[^\s!@:]+(?:(?:![^\s!@]+)?@[^\s!@]+)?$")

ENCODINGS = ("utf-8", "latin-1", "ascii")


def is_prefix(s):
  return PREFIX_REGEX.match(s) is not None


class Origin(config.Section):
  nickname = config.optional(str)
  username = str
  host = str

class Config(config.Section):
  prefix = config.optional(
      config.constrained(str, lambda x: (is_prefix(x),
                                         "not a servername or hostmask")))
  origin = config.optional(Origin)
  encoding = config.optional(config.any(ENCODINGS))
