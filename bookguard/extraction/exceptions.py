class ExtractionError(Exception):
    """Base exception for all text-extraction errors."""


class UnsupportedFormatError(ExtractionError):
    """Raised when a document's declared kind cannot be extracted."""


class ExtractionFailedError(ExtractionError):
    """Raised when opening, reading or recognizing any page fails.

    The underlying fault is preserved as ``__cause__``.
    """
