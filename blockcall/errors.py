"""
Error types raised by request handlers and mapped to JSON responses
"""


class ApiError(Exception):
    """Base error carrying the HTTP status it should be reported with"""

    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    status = 400


class NotFoundError(ApiError):
    status = 404
