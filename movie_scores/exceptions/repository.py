class RepositoryException(Exception):
    """Base exception for all repository-related errors."""
    pass

class EntityNotFoundException(RepositoryException):
    """Raised when an entity cannot be found in the repository."""
    pass

class InvalidEntityDataException(RepositoryException):
    """Raised when entity data is invalid or malformed."""
    pass

class RepositoryOperationException(RepositoryException):
    """Raised when a repository operation fails for any reason not covered by other exceptions."""
    pass

class TransientRepositoryException(RepositoryException):
    """Raised on lock timeouts, deadlocks and serialization failures. The whole operation may be retried."""
    pass

class IntegrityViolationException(RepositoryException):
    """Raised when a write is rejected by a unique or foreign key constraint."""
    pass
