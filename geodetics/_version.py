"""
Exposes the version of geodetics
"""
__version__ = 'v0.1.0'
