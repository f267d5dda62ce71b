"""
CLI interface for unitconv.

Usage:
    python -m unitconv 1mib
    python -m unitconv --help
"""

from .cli import main

if __name__ == "__main__":
    main()
