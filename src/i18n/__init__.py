"""Locale handling.

This module parses and serializes language-script-region tags.
Detectors and profiles use these tags as hashable language keys.
"""
