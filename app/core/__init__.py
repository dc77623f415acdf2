"""
Core movie catalog logic: validation, error types and the store interface
with its in-memory implementation.
"""
