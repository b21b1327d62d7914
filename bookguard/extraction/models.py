from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath


class MediaKind(str, Enum):
    """Declared kind of an uploaded document."""

    PLAIN_TEXT = "text/plain"
    PAGINATED = "application/pdf"
    UNSUPPORTED = "unsupported"


_KIND_BY_EXTENSION: dict[str, MediaKind] = {
    ".txt": MediaKind.PLAIN_TEXT,
    ".pdf": MediaKind.PAGINATED,
}


@dataclass(frozen=True)
class SourceDocument:
    """A user-selected file: raw payload plus its declared kind."""

    payload: bytes
    kind: MediaKind
    name: str = ""

    @property
    def byte_length(self) -> int:
        return len(self.payload)

    @classmethod
    def from_upload(
        cls,
        name: str,
        payload: bytes,
        mime_type: str | None = None,
    ) -> "SourceDocument":
        return cls(payload=payload, kind=classify(name, mime_type), name=name)


def classify(name: str, mime_type: str | None = None) -> MediaKind:
    """Map a declared MIME type, else the file extension, to a MediaKind."""
    if mime_type:
        essence = mime_type.split(";", 1)[0].strip().lower()
        for kind in (MediaKind.PLAIN_TEXT, MediaKind.PAGINATED):
            if essence == kind.value:
                return kind
    return _KIND_BY_EXTENSION.get(PurePath(name).suffix.lower(), MediaKind.UNSUPPORTED)
