from pathlib import Path

from bookguard.extraction.models import SourceDocument
from bookguard.processor.exceptions import FileReadError, FileTooLargeError


class FileLoader:
    """Reads a user-selected file from disk into a SourceDocument."""

    DEFAULT_MAX_BYTES = 10 * 1024 * 1024

    def __init__(self, max_bytes: int | None = None) -> None:
        self._max_bytes = max_bytes if max_bytes is not None else self.DEFAULT_MAX_BYTES

    def load(self, path: Path, mime_type: str | None = None) -> SourceDocument:
        """Read document bytes from disk and classify them.

        Raises:
            FileNotFoundError: if the file does not exist.
            FileTooLargeError: if the file is bigger than the upload limit.
            FileReadError: if the file exists but cannot be read.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        size = path.stat().st_size
        if size > self._max_bytes:
            raise FileTooLargeError(
                f"{path.name} is {size} bytes, limit is {self._max_bytes}"
            )
        try:
            payload = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
        return SourceDocument.from_upload(path.name, payload, mime_type)
