#!/usr/bin/env python3
"""
Allow running swimclub-e2e as a module: python -m swimclub_e2e

This enables the following usage:
    python -m swimclub_e2e [OPTIONS] COMMAND

Which is equivalent to:
    swimclub-e2e [OPTIONS] COMMAND
"""

from swimclub_e2e.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
