"""Allow ``python -m enumizer``."""

import sys

from enumizer.presentation.cli import main

sys.exit(main())
