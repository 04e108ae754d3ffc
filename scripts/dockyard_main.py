#!/usr/bin/env python3
"""
Entry point for running the dashboard from a checkout.

This must be a separate file (not -c inline) to ensure stdin is properly
connected as a TTY for keyboard input.
"""

from dockyard_core.cli.main import main

if __name__ == "__main__":
    main()
