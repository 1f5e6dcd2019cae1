"""Command line interface.

This module wires argparse commands onto profile building, detection
and validation.
"""
