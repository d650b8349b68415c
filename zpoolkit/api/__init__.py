"""
HTTP API for zpoolkit.
"""
