#!/usr/bin/env python3
"""
Entry point for running clusternet as a module
This allows running: python -m clusternet
"""

from clusternet.cli import app

if __name__ == "__main__":
    app()
