class ConfluenceError(Exception):
    """Base exception for Confluence client errors"""

    def __init__(self, message: str, details: dict = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(ConfluenceError, ValueError):
    """Raised when a query or API call receives a missing or illegal argument"""


class InvalidOperationError(ConfluenceError):
    """Raised when an operation is not supported by the object it is called on"""


class InvariantViolationError(ConfluenceError):
    """Raised when an internal lookup table is inconsistent"""


class ConfluenceApiError(ConfluenceError):
    """Raised when the Confluence REST API answers with an unexpected status"""

    def __init__(
        self,
        message: str = "Confluence API request failed",
        status_code: int = None,
        reason: str = None,
        details: dict = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
        self.reason = reason

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code}): {self.reason or 'no reason given'}"
