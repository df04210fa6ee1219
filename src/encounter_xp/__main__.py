"""Allow ``python -m encounter_xp``."""

import sys

from encounter_xp.cli import main


sys.exit(main())
