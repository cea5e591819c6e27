class AuthException(Exception):
    """Base exception for authentication errors"""
    pass

class UnauthenticatedException(AuthException):
    """Raised when the caller's identity cannot be resolved from the request"""
    pass
