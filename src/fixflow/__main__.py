"""Allow ``python -m fixflow``."""

import sys

from fixflow.cli import main

sys.exit(main())
