"""Profile quality validation.

This module estimates a profile's detection accuracy with k-fold
cross-validation over a single text sample.
"""
