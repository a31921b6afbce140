class ReviewFlagsError(Exception):
    """Base class for all review-flags exceptions."""
    pass

class TransportError(ReviewFlagsError):
    """Raised when a label call fails before any HTTP response is received."""
    pass

class ConfigError(ReviewFlagsError):
    """Raised when the configuration file cannot be read."""
    pass
