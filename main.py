#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
ASS/SSA section round-trip checker.
Main command-line entry point.
"""

import sys
from ssa_core.cli import main

if __name__ == '__main__':
    sys.exit(main())
