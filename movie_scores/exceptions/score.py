class ScoreServiceException(Exception):
    """Base exception for score operation errors."""
    pass

class ScoreInvariantException(ScoreServiceException):
    """Raised when a recomputed aggregate contradicts the write that triggered it."""
    pass
