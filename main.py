#!/usr/bin/env python3
"""Thin wrapper: run got CLI. Usage: python main.py <cmd> ... (same as python -m got)."""

import sys

if __name__ == "__main__":
    from got.cli import main
    sys.exit(main())
