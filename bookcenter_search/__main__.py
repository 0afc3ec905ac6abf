#!/usr/bin/env python3
"""
BookCenter Search - Main Entry Point

This module allows the package to be run as a script:
    python -m bookcenter_search
"""

# Local imports
from bookcenter_search.adapters.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
