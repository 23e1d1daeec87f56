"""Allow ``python -m brokersync``."""

from __future__ import annotations

import sys

from brokersync.cli import main

if __name__ == "__main__":
    sys.exit(main())
