# scantiff/external/__init__.py
"""
Package for interacting with the external converter, opener and trash tools.
"""
