"""
zpoolkit - programmatic access to the ``zpool`` command line tool.

Runs ``zpool`` subcommands, parses their text reports into pools, vdev
groups and devices, and exposes importable (exported or destroyed) pools
so they can be brought back online.
"""

__version__ = "0.1.0"
