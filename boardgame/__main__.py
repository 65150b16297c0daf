"""Allow `python -m boardgame`."""

import sys

from boardgame.interfaces.cli import main

sys.exit(main())
