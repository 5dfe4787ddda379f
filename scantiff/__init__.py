"""
scantiff: turn photographed JPEG documents into small, scanner-like TIFFs.
"""

__version__ = "1.0.0"
