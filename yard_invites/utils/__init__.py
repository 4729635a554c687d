"""
Shared client wrappers.
"""
