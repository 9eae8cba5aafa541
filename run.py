#!/usr/bin/env python3
"""
run.py - Main entry point for multiconnect

Examples:
    python run.py play --players 3
    python run.py --debug-level debug benchmark --iterations 200
"""

from multiconnect.interfaces.cli import main


if __name__ == "__main__":
    main()
