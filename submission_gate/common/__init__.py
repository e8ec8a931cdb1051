"""Shared constants, errors, configuration and logging for submission_gate."""
