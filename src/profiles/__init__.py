"""Language profiles.

This module holds immutable per-language n-gram frequency tables,
the builder that trains them, and their JSON persistence.
"""
