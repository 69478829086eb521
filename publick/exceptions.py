from __future__ import annotations


class CustomBodyException(Exception):
    """Error rendered to the client as a JSON body with the given status code."""

    def __init__(self, status_code: int, body: dict):
        super().__init__(body)
        self.status_code = status_code
        self.body = body


class ErrorMessageException(CustomBodyException):
    def __init__(self, status_code: int, error_code: int, message: str):
        super().__init__(status_code, {"error_message": message, "error_code": error_code})

        self.error_code = error_code
        self.error_message = message

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.error_message}"

    def format(self, *args, **kwargs) -> ErrorMessageException:
        """Copy of this error with the message placeholders filled in, e.g. the backup or setting name."""
        return ErrorMessageException(self.status_code, self.error_code, self.error_message.format(*args, **kwargs))
