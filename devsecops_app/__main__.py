"""Allow ``python -m devsecops_app``."""

import sys

from devsecops_app.main import main

sys.exit(main())
