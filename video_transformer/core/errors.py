"""
Error taxonomy for the Video Transformer.

Every error that can end a request inherits from VideoTransformerError and
carries a stable machine-readable code plus the HTTP status it maps to.
Errors are terminal for the request that raised them; nothing is retried.
"""


class VideoTransformerError(Exception):
    """Base exception for all request-terminating failures."""

    code = "error"
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


# Validation


class ValidationError(VideoTransformerError):
    """Raised when a request is rejected before any work is attempted."""

    code = "invalid_request"
    status_code = 400


class InvalidSizeFormat(ValidationError):
    code = "invalid_size_format"

    def __init__(self, text: str):
        self.text = text
        super().__init__("Invalid size format.")


class SizeExceeded(ValidationError):
    code = "size_exceeded"

    def __init__(self, file_size: int, max_bytes: int):
        self.file_size = file_size
        self.max_bytes = max_bytes
        super().__init__("File size exceeds the allowed limit.")


class DurationOutOfBounds(ValidationError):
    code = "duration_out_of_bounds"

    def __init__(self, duration: float, min_seconds: float, max_seconds: float):
        self.duration = duration
        self.min_seconds = min_seconds
        self.max_seconds = max_seconds
        super().__init__("Video duration is out of bounds.")


class InvalidRequest(ValidationError):
    """Malformed operation input (too few merge ids, missing trim bounds)."""

    pass


class InvalidTrimRange(ValidationError):
    code = "invalid_trim_range"

    def __init__(self, start: float, end: float):
        self.start = start
        self.end = end
        super().__init__(f"Invalid trim range: start {start} must be non-negative and before end {end}.")


# Lookup


class NotFoundError(VideoTransformerError):
    """Raised when a video or link cannot be found."""

    code = "not_found"
    status_code = 404


class ExpiredError(NotFoundError):
    """A share link past its expiry. Reported as a not-found class outcome."""

    code = "link_expired"

    def __init__(self, link_id: str):
        self.link_id = link_id
        super().__init__("The video link has expired")


# External media capability


class ProcessingError(VideoTransformerError):
    """Raised when the external media tool fails to produce an output."""

    code = "processing_failed"
    status_code = 422


class ProbeFailure(VideoTransformerError):
    """Raised when the external media tool cannot report a duration."""

    code = "probe_failed"
    status_code = 422


class MediaToolError(Exception):
    """Raised by the media tool wrapper; translated before leaving the core."""

    def __init__(self, message: str, returncode: int = None):
        self.returncode = returncode
        super().__init__(message)


# Persistence


class CatalogError(VideoTransformerError):
    """Raised when the catalog index cannot be read or written."""

    code = "catalog_error"
    status_code = 500
