"""Request-level failures reported to API callers.

Only these two reach the caller; an absent signal on the page is a
warning/error item inside the report, never an exception.
"""


class AnalyzerError(Exception):
    """Base failure carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingParameterError(AnalyzerError):
    status_code = 400

    def __init__(self, message: str = "URL parameter is required") -> None:
        super().__init__(message)


class RetrievalError(AnalyzerError):
    """Network error or timeout while fetching the page."""

    status_code = 500
