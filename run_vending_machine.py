#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Vending Machine Launcher

Runs the interactive session from a source checkout.

Usage:
    python run_vending_machine.py
    python run_vending_machine.py --config config.yaml --log-level INFO
"""

import os
import sys

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from vending_core.cli import main


if __name__ == '__main__':
    sys.exit(main())
