#!/usr/bin/env python3
"""
Main entry point for running the Password Analyzer as a module.
"""

import sys
from password_analyzer.cli import main

if __name__ == "__main__":
    sys.exit(main())
