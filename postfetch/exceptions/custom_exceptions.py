"""Custom exception types for clearer error handling."""

class PostFetchError(Exception):
    """Base exception for the app."""

class TransportError(PostFetchError):
    """Raised when the GET request itself could not complete."""

    def __init__(self, cause: BaseException):
        super().__init__(f"failed to fetch data: {cause}")

class UnexpectedStatusError(PostFetchError):
    """Raised when the response status is not 200 OK."""

    def __init__(self, status_code: int):
        super().__init__(f"unexpected status code: {status_code}")
        self.status_code = status_code

class BodyReadError(PostFetchError):
    """Raised when the response body could not be read to the end."""

    def __init__(self, cause: BaseException):
        super().__init__(f"failed to read response body: {cause}")
