class ReportExportError(Exception):
    """Raised when a report file cannot be written."""
