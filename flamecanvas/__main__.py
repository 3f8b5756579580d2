"""Allow ``python -m flamecanvas``."""

from __future__ import annotations

import sys

from flamecanvas.cli.render import main


if __name__ == "__main__":
    sys.exit(main())
