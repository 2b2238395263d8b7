#!/usr/bin/env python3
"""
Sui types command-line entry point
Usage: python -m sui_types.main <command> [args]
"""
from .cli import main

if __name__ == "__main__":
    main()
