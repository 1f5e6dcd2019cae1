"""Shared core layer.

This module holds configuration, errors, logging and typed result rows
used by every other langprofile package.
"""
