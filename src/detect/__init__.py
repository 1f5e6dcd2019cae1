"""Language detection.

This module indexes language profiles and scores texts against them.
It exposes the detector, its builder and the shared frequency index.
"""
