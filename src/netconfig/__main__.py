"""Allow ``python -m netconfig``."""
import sys

from .cli import main

sys.exit(main())
