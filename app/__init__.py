"""
Movies API application package.

This package contains the REST API, movie validation, the in-memory and
relational movie stores, and shared utilities.
"""

__version__ = "1.0.0"
