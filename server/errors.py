class GameError(Exception):
    """Base for errors that map onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GameError):
    status_code = 400


class NotFoundError(GameError):
    status_code = 404


class UpstreamServiceError(GameError):
    # Always absorbed by the narrative fallback, never rendered to a client.
    status_code = 502


class InternalFault(GameError):
    status_code = 500


def status_for(exc: Exception) -> int:
    if isinstance(exc, GameError):
        return exc.status_code
    return 500
