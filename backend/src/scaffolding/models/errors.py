"""
Scaffolding Property Metadata - Errors
"""


class PreconditionViolation(ValueError):
    """
    Raised when a property descriptor handed to a factory is unusable.

    Covers a missing descriptor, a descriptor without a name, and a
    descriptor whose value type cannot be determined. This is a programming
    error in the caller and is not meant to be recovered from.
    """
    pass
