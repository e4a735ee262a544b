"""
DB fixture REST API for test and staging environments.
"""
__version__ = "0.1.0"
