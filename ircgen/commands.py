import inspect


class UnknownOperation(KeyError):
  pass


class Operation(object):
  NAME_FORMAT = None

  def __init__(self, keyword, required=(), optional=()):
    self.keyword = keyword
    self.required = tuple(required)
    self.optional = tuple(optional)

  @property
  def name(self):
    return self.NAME_FORMAT.format(keyword=self.keyword.lower())

  @property
  def arguments(self):
    return self.required + self.optional

  @property
  def signature(self):
    kind = inspect.Parameter.POSITIONAL_OR_KEYWORD

    params = [inspect.Parameter("self", kind)]
    params.extend(inspect.Parameter(name, kind) for name in self.required)
    params.extend(inspect.Parameter(name, kind, default=None)
                  for name in self.optional)
    return inspect.Signature(params)

  def as_method(self):
    signature = self.signature

    def _method(*args, **kwargs):
      bound = signature.bind(*args, **kwargs)
      bound.apply_defaults()
      generator = bound.arguments.pop("self")
      return self.emit(generator, bound.arguments)

    _method.__name__ = _method.__qualname__ = self.name
    _method.__signature__ = signature
    _method.__doc__ = self.describe()
    return _method

  def describe(self):
    raise NotImplementedError

  def emit(self, generator, arguments):
    raise NotImplementedError


class Command(Operation):
  NAME_FORMAT = "irc_{keyword}"

  def __init__(self, keyword, required=(), optional=(), wire_order=None):
    super().__init__(keyword, required, optional)
    self.wire_order = tuple(wire_order) if wire_order is not None \
                                        else self.arguments

  def describe(self):
    return "Returns a {} message.".format(self.keyword)

  def as_params(self, arguments):
    return [arguments[name] for name in self.wire_order]

  def emit(self, generator, arguments):
    return generator.encode(self.keyword, self.as_params(arguments))


class CtcpRequest(Operation):
  NAME_FORMAT = "ctcp_{keyword}_request"
  TARGET = "receivers"
  KIND = "request"

  def __init__(self, keyword, arguments=(), template=None):
    super().__init__(keyword, (self.TARGET,) + tuple(arguments))
    self.template = template

  def describe(self):
    return "Returns a CTCP {} {}.".format(self.keyword, self.KIND)

  def as_argument(self, arguments):
    if self.template is None:
      return None

    # Omitted values render as empty text, never as "None".
    return self.template.format(**{
        name: "" if value is None else value
        for name, value in arguments.items()})

  def emit(self, generator, arguments):
    return generator.ctcp_request(arguments[self.TARGET], self.keyword,
                                  self.as_argument(arguments))


class CtcpResponse(CtcpRequest):
  NAME_FORMAT = "ctcp_{keyword}_response"
  TARGET = "nickname"
  KIND = "response"

  def emit(self, generator, arguments):
    return generator.ctcp_response(arguments[self.TARGET], self.keyword,
                                   self.as_argument(arguments))


CATALOG = [
    Command("PASS", ["password"]),
    Command("NICK", ["nickname"], ["hopcount"]),
    Command("USER", ["username", "hostname", "servername", "realname"]),
    Command("SERVER", ["servername", "hopcount", "info"]),
    Command("OPER", ["user", "password"]),
    Command("QUIT", [], ["message"]),
    Command("SQUIT", ["server", "comment"]),
    Command("JOIN", ["channels"], ["keys"]),
    Command("PART", ["channels"], ["message"]),
    Command("MODE", ["target"], ["mode", "param"]),
    Command("TOPIC", ["channel"], ["topic"]),
    Command("NAMES", ["channels"]),
    Command("LIST", [], ["channels", "server"]),
    Command("INVITE", ["nickname", "channel"]),
    Command("KICK", ["channel", "user"], ["comment"]),
    Command("VERSION", [], ["server"]),
    Command("STATS", ["query"], ["server"]),
    Command("LINKS", [], ["mask", "remote"], wire_order=["remote", "mask"]),
    Command("TIME", [], ["server"]),
    Command("CONNECT", ["target_server"], ["port", "remote_server"]),
    Command("TRACE", [], ["server"]),
    Command("ADMIN", [], ["server"]),
    Command("INFO", [], ["server"]),
    Command("PRIVMSG", ["receivers", "text"]),
    Command("NOTICE", ["nickname", "text"]),
    Command("WHO", ["name"], ["o"]),
    Command("WHOIS", ["nickmasks"], ["server"],
            wire_order=["server", "nickmasks"]),
    Command("WHOWAS", ["nickname"], ["count", "server"]),
    Command("KILL", ["nickname", "comment"]),
    Command("PING", ["server1"], ["server2"]),
    Command("PONG", ["daemon"], ["daemon2"]),
    Command("ERROR", ["message"]),
    Command("AWAY", [], ["message"]),
    Command("REHASH"),
    Command("RESTART"),
    Command("SUMMON", ["user"], ["server"]),
    Command("USERS", [], ["server"]),
    Command("WALLOPS", ["text"]),
    Command("USERHOST", ["nickname1"],
            ["nickname2", "nickname3", "nickname4", "nickname5"]),
    Command("ISON", ["nicknames"]),
    Command("PROTOCTL", ["proto"]),

    CtcpRequest("FINGER"),
    CtcpResponse("FINGER", ["text"], "{text}"),
    CtcpRequest("VERSION"),
    CtcpResponse("VERSION", ["name", "version", "environment"],
                 "{name}:{version}:{environment}"),
    CtcpRequest("SOURCE"),
    CtcpResponse("SOURCE", ["host", "directories", "files"],
                 "{host}:{directories}:{files}"),
    CtcpRequest("USERINFO"),
    CtcpResponse("USERINFO", ["text"], "{text}"),
    CtcpRequest("CLIENTINFO"),
    CtcpResponse("CLIENTINFO", ["client"], "{client}"),
    CtcpRequest("ERRMSG", ["query"], "{query}"),
    CtcpResponse("ERRMSG", ["query", "message"], "{query} :{message}"),
    CtcpRequest("PING", ["timestamp"], "{timestamp}"),
    CtcpResponse("PING", ["timestamp"], "{timestamp}"),
    CtcpRequest("TIME"),
    CtcpResponse("TIME", ["time"], "{time}"),
    CtcpRequest("ACTION", ["action"], "{action}"),
    CtcpResponse("ACTION", ["action"], "{action}"),
]

REGISTRY = {}
VERBS = {}


def register(operation):
  REGISTRY[operation.name] = operation
  if isinstance(operation, Command):
    VERBS[operation.keyword] = operation
  return operation


def register_all(operations):
  for operation in operations:
    register(operation)


register_all(CATALOG)


def get(name):
  try:
    return REGISTRY[name]
  except KeyError:
    pass

  try:
    return VERBS[name.upper()]
  except KeyError:
    raise UnknownOperation(name)
