"""Internal modules for httpy.

These are not intended for direct use in application code.

Modules:
    http - Default httpx transport configuration
    redaction - Header redaction for debug output
"""
