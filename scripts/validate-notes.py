#!/usr/bin/env python3
"""
Validate the study-guide notes.

Usage:
    python3 scripts/validate-notes.py
    python3 scripts/validate-notes.py --strict  # treat warnings as errors
    python3 scripts/validate-notes.py --section dsa
"""

import sys

from studyguide.cli import main

if __name__ == "__main__":
    sys.exit(main(["validate", *sys.argv[1:]]))
