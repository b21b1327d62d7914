class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class FileReadError(ProcessorError):
    """Raised when a file cannot be read from disk."""


class FileTooLargeError(ProcessorError):
    """Raised when a file exceeds the configured upload size limit."""
