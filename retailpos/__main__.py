"""Entry point for ``python -m retailpos``."""

import sys

from retailpos.cli import main

sys.exit(main())
