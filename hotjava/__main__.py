"""Allow ``python -m hotjava``."""

import sys

from .main import main

sys.exit(main())
