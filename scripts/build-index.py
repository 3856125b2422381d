#!/usr/bin/env python3
"""
Write the notes index as YAML.

Usage:
    python3 scripts/build-index.py                     # print to stdout
    python3 scripts/build-index.py --out data/index.yaml
"""

import sys

from studyguide.cli import main

if __name__ == "__main__":
    sys.exit(main(["index", *sys.argv[1:]]))
