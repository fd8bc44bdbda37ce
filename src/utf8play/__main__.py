"""
utf8play package entry point.

Allows running: python -m utf8play [command] [args]
"""
import sys
from .api.cli import main

if __name__ == "__main__":
    sys.exit(main())
