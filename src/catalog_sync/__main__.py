"""Allow running catalog-sync with ``python -m catalog_sync``."""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
