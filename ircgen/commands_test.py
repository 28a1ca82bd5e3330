import unittest
from unittest import mock

from ircgen import commands


class GetTest(unittest.TestCase):
  def test_get_by_name(self):
    assert commands.get("irc_links").keyword == "LINKS"
    assert commands.get("ctcp_ping_response").keyword == "PING"

  def test_get_by_verb(self):
    assert commands.get("privmsg").name == "irc_privmsg"
    assert commands.get("PING").name == "irc_ping"

  def test_get_unknown(self):
    with self.assertRaises(commands.UnknownOperation):
      commands.get("FROB")

  def test_names_are_unique(self):
    assert len(commands.REGISTRY) == len(commands.CATALOG)


class CommandTest(unittest.TestCase):
  def test_wire_order_defaults_to_call_order(self):
    command = commands.Command("KICK", ["channel", "user"], ["comment"])
    assert command.as_params({"channel": "#c", "user": "u",
                              "comment": None}) == ["#c", "u", None]

  def test_wire_order(self):
    command = commands.get("LINKS")
    assert command.arguments == ("mask", "remote")
    assert command.as_params({"mask": "m", "remote": "r"}) == ["r", "m"]

  def test_emit(self):
    gen = mock.Mock()
    commands.get("TOPIC").emit(gen, {"channel": "#c", "topic": None})
    gen.encode.assert_called_once_with("TOPIC", ["#c", None])


class CtcpTest(unittest.TestCase):
  def test_request_without_template(self):
    gen = mock.Mock()
    commands.get("ctcp_version_request").emit(gen, {"receivers": "r"})
    gen.ctcp_request.assert_called_once_with("r", "VERSION", None)

  def test_response_with_template(self):
    gen = mock.Mock()
    commands.get("ctcp_source_response").emit(
        gen, {"nickname": "n", "host": "h", "directories": "d", "files": "f"})
    gen.ctcp_response.assert_called_once_with("n", "SOURCE", "h:d:f")

  def test_targets(self):
    assert commands.get("ctcp_finger_request").required == ("receivers",)
    assert commands.get("ctcp_finger_response").required == \
        ("nickname", "text")
