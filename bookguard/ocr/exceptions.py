class OcrError(Exception):
    """Raised when text recognition fails."""


class OcrTimeoutError(OcrError):
    """Raised when recognition of a single page exceeds its time budget."""
