"""Line model for scanned dotenv files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DELIMITER = "="
COMMENT_PREFIX = "#"


class ScanError(RuntimeError):
    """Raised when a dotenv file cannot be read or decoded."""


@dataclass(frozen=True, slots=True)
class FileEntry:
    """Identity of a scanned file."""

    path: Path
    file_name: str
    total_lines: int


@dataclass(frozen=True, slots=True)
class LineEntry:
    """A single physical line of a dotenv file."""

    number: int
    file: FileEntry
    raw_string: str

    def __post_init__(self) -> None:
        if not 1 <= self.number <= self.file.total_lines:
            raise ValueError(
                f"Line number {self.number} is outside 1..{self.file.total_lines} "
                f"for {self.file.path}"
            )

    @property
    def is_comment(self) -> bool:
        return self.raw_string.lstrip().startswith(COMMENT_PREFIX)

    @property
    def is_blank(self) -> bool:
        return not self.raw_string.strip()

    def get_key(self) -> str | None:
        """Return the text before the first delimiter, if it is non-empty."""
        key, found, _ = self.raw_string.partition(DELIMITER)
        if not found or not key:
            return None
        return key

    def get_value(self) -> str | None:
        """Return the text after the first delimiter when the line has a key."""
        if self.get_key() is None:
            return None
        return self.raw_string.partition(DELIMITER)[2]


def parse_lines(text: str, path: Path) -> list[LineEntry]:
    """Split decoded file text into line entries in file order."""
    # Only \n ends a line; a preceding \r belongs to the line ending.
    raw_lines = [raw.removesuffix("\r") for raw in text.split("\n")]
    if raw_lines[-1] == "":
        raw_lines.pop()
    file_entry = FileEntry(path=path, file_name=path.name, total_lines=len(raw_lines))
    return [
        LineEntry(number=index, file=file_entry, raw_string=raw)
        for index, raw in enumerate(raw_lines, start=1)
    ]


def load_file(path: Path) -> list[LineEntry]:
    """Read a UTF-8 dotenv file and return its lines."""
    try:
        with path.open(encoding="utf-8", newline="") as file_obj:
            text = file_obj.read()
    except UnicodeDecodeError as exc:
        raise ScanError(f"File is not valid UTF-8: {path}") from exc
    except OSError as exc:
        raise ScanError(f"Unable to read {path}: {exc.strerror or exc}") from exc
    return parse_lines(text, path)
