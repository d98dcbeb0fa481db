#!/usr/bin/env python
"""Build a table of Stendhal item statistics.

Usage: python stendhal_items.py [-c class] [-s column] [--stdout] [-o dir]
"""

from stendhal.cli import main

if __name__ == "__main__":
    main()
