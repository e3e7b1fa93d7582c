"""
Buffalo Dashboard - admin backend for managed app button links.
"""
__version__ = "1.0.0"
