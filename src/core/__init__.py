"""
Core numerical value types.

This package contains the dense Vector and Matrix value types and the
precondition guards they share. It has no dependencies on external
systems beyond pydantic for configuration models.
"""
