class PdfExtractionError(Exception):
    """Raised when a paginated document cannot be opened, read or rendered."""
