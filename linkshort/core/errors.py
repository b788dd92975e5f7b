class ShortenerError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = 400
    message = "Bad request"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class InvalidURL(ShortenerError):
    message = "Malformed URL"


class InvalidRequest(ShortenerError):
    message = "Invalid request body"


class InvalidIdentifier(ShortenerError):
    message = "Invalid identifier"


class Unauthorized(ShortenerError):
    status_code = 401
    message = "Wrong password"


class NotFound(ShortenerError):
    message = "Link not found"


class TargetConflict(ShortenerError):
    status_code = 409
    message = "Target is already shortened"


class KeyspaceExhausted(ShortenerError):
    status_code = 503
    message = "Could not allocate an unused identifier"


class ConfigurationError(Exception):
    pass
