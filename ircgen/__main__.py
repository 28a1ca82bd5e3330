import sys

from ircgen import cli

sys.exit(cli.main())
