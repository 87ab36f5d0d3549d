"""
Where4 package entry point.

Allows running: python -m where4 [command] [args]
"""
import sys
from .api.cli import main

if __name__ == "__main__":
    sys.exit(main())
