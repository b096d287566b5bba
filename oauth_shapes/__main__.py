"""
OAuth wire document validator

Usage:
    python -m oauth_shapes validate <kind> <file|->
    python -m oauth_shapes kinds
"""

import sys
from oauth_shapes.cli import main


if __name__ == "__main__":
    sys.exit(main())
