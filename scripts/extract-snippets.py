#!/usr/bin/env python3
"""
Extract code listings from the notes and syntax-check the Python ones.

Usage:
    python3 scripts/extract-snippets.py
    python3 scripts/extract-snippets.py --language python --out build/snippets
"""

import sys

from studyguide.cli import main

if __name__ == "__main__":
    sys.exit(main(["snippets", *sys.argv[1:]]))
