"""
Error types shared by the allocation engine and its collaborators.
"""


class InvalidInputError(ValueError):
    """Raised when an entry is malformed (end before start, negative amounts, ...)."""
