#!/usr/bin/env python3
"""
Check every external URL in the notes.

Usage:
    python3 scripts/validate-links.py
    python3 scripts/validate-links.py --workers 5 --timeout 20
"""

import sys

from studyguide.cli import main

if __name__ == "__main__":
    sys.exit(main(["links", *sys.argv[1:]]))
