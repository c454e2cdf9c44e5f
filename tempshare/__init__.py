"""
TempShare

Temporary file-sharing service: uploads get a shareable link and are purged
once their expiration window passes.
"""

__version__ = "1.0.0"
