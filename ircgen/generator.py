import copy
import logging

from ircgen import commands
from ircgen import emitter

logger = logging.getLogger(__name__)


class Generator(object):
  OPERATIONS = {}

  def __init__(self, prefix=None, encoding=None):
    self.prefix = prefix
    self.encoding = encoding

  @classmethod
  def from_config(cls, cfg):
    from ircgen import config
    from ircgen import config_format

    cfg = config.validate(copy.deepcopy(cfg) if cfg is not None else {},
                          config_format.Config)

    prefix = cfg["prefix"]
    origin = cfg["origin"]

    if prefix is None and origin is not None:
      prefix = emitter.emit_hostmask(origin["nickname"], origin["username"],
                                     origin["host"])

    return cls(prefix, encoding=cfg["encoding"])

  @classmethod
  def from_config_file(cls, filename):
    from ircgen import config

    logger.info("Loading configuration from {}.".format(filename))
    return cls.from_config(config.load(filename))

  @classmethod
  def install(cls, operation):
    cls.OPERATIONS[operation.name] = operation
    setattr(cls, operation.name, operation.as_method())
    logger.debug("{} installed.".format(operation.name))
    return operation

  @classmethod
  def install_all(cls, operations):
    for operation in operations:
      cls.install(operation)

  def set_prefix(self, prefix):
    logger.debug("Prefix set to {!r}.".format(prefix))
    self.prefix = prefix

  def encode(self, command, params=()):
    line = emitter.emit_message(self.prefix, command, params)
    logger.debug("-> {!r}".format(line))

    if self.encoding is not None:
      # Characters the encoding cannot represent become "?".
      return line.encode(self.encoding, errors="replace")
    return line

  def ctcp_request(self, receivers, keyword, argument=None):
    return self.irc_privmsg(receivers, emitter.ctcp_quote(keyword, argument))

  def ctcp_response(self, nickname, keyword, argument=None):
    return self.irc_notice(nickname, emitter.ctcp_quote(keyword, argument))


Generator.install_all(commands.CATALOG)
