class MovieServiceException(Exception):
    """Base exception for movie catalogue errors."""
    pass

class ResourceNotFoundException(MovieServiceException):
    """Raised when a requested movie does not exist."""
    pass

class DatabaseException(MovieServiceException):
    """Raised when an operation would break referential integrity (e.g. deleting a scored movie)."""
    pass
