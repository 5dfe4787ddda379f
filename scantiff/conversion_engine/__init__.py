# scantiff/conversion_engine/__init__.py
"""
Package for the core conversion workflow logic.
"""
