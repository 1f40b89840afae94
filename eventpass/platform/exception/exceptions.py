class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int, code: str | None = None) -> None:
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400, code: str | None = None) -> None:
        super().__init__(message, status_code, code)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, 403, code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, 404, code)


class ConflictError(CustomBaseError):
    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, 409, code)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class LoginError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class ServiceUnavailableError(CustomBaseError):
    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, 503, code)
