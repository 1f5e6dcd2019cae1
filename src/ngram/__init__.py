"""Text normalization and n-gram extraction.

This module turns raw text into weighted n-grams for profile training
and detector scoring.
"""
