class InvalidArgumentError(TypeError, ValueError):
    """Raised when curry is given a non-callable target or an unusable arity."""
