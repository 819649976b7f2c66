#!/usr/bin/env python3
"""
clipio entry point for running as a module: python3 -m clipio
"""

import sys
from clipio.cli import main

if __name__ == '__main__':
    sys.exit(main())
