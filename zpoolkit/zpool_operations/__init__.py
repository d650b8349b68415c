"""
ZPool operations: core model, command execution, output parsers and services.
"""
