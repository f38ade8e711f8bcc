"""
User-facing image types and IO.
"""
