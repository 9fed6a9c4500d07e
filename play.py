#!/usr/bin/env python3
"""
Play against the engine from a source checkout.

Usage:
    python play.py
    python play.py --engine o --hints
"""

import sys
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from xo.play import main

if __name__ == "__main__":
    main()
