CRLF = "\r\n"
CTCP_DELIMITER = "\x01"


def emit_hostmask(nickname, username, host):
  if nickname is None:
    return "{}@{}".format(username, host)
  return "{}!{}@{}".format(nickname, username, host)


def emit_message(prefix, command, params=()):
  buf = []

  if prefix:
    buf.append(":" + prefix)

  buf.append(command)

  params = [str(param) for param in params if param is not None]

  # The last parameter is always marked as trailing, even when it would parse
  # without the colon.
  if params:
    *init, last = params
    buf.extend(init)
    buf.append(":" + last)

  return " ".join(buf) + CRLF


def ctcp_quote(keyword, argument=None):
  if argument is not None:
    keyword = "{} {}".format(keyword, argument)
  return CTCP_DELIMITER + keyword + CTCP_DELIMITER
