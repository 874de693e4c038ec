"""
Client-side validation errors.
"""


class InvalidInputError(ValueError):
    """User input was rejected before reaching the store."""
