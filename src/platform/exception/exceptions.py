class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class InvalidInputError(DomainError):
    """Non-numeric (or out of range) input where a number is expected."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class StorageUnavailableError(CustomBaseError):
    """Ticket storage could not be opened, read or written."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 503)
