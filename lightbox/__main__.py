"""
Main entry point for running the package as a module.

Usage:
    python -m lightbox inspect index.html
    python -m lightbox replay index.html item:0 next key:Escape
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
