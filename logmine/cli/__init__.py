"""
Command line interface for LogMine.
"""

from logmine.cli.commands import cluster

__all__ = ['cluster']
