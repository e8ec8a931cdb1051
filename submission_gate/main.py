#!/usr/bin/env python3
"""
Main entry point for Submission Gate.

Console script target for `submission-gate`.
"""

from submission_gate.cli import main

if __name__ == '__main__':
    main()
