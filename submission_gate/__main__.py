#!/usr/bin/env python3
"""
Main entry point for Submission Gate when run as a module.

This allows the package to be executed with: python -m submission_gate
"""

from .cli import main

if __name__ == '__main__':
    main()
