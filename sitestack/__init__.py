""" Restart and reload the service containers of managed sites.
"""
__version__ = "0.1.0"
