"""
Entry point for running the package: python -m undoredo
"""
import sys

from undoredo.app import main

if __name__ == "__main__":
    sys.exit(main())
