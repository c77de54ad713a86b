#!/usr/bin/env python3
"""
Image to Block ASCII Art
========================
Command line entry point, see ``python main.py --help``.
"""

import sys

from ascii_block_renderer.cli import main


if __name__ == '__main__':
    sys.exit(main())
