class InvariantViolation(RuntimeError):
    """
    raised when a caller breaks a board invariant
    (bad index, wrong board length, unsupported variant)
    """
