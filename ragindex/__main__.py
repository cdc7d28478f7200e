"""Allow ``python -m ragindex``."""

import sys

from ragindex.main import main

sys.exit(main())
