"""
Version 1 of the Users API.
"""
