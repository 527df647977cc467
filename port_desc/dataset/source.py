from __future__ import annotations

from importlib import resources
from pathlib import Path

from .reader import DatasetError, PortDescError

"""Dataset acquisition: bundled registry excerpt or a caller-supplied CSV file.

Both return the raw text; parsing is the reader's job.
"""

__all__ = [
    "BUNDLED_DATASET",
    "BUNDLED_SOURCE",
    "SourceUnavailableError",
    "read_bundled_text",
    "read_source_text",
]

ASSETS_PACKAGE = "port_desc.assets"
BUNDLED_DATASET = "service-names-port-numbers.csv"
BUNDLED_SOURCE = "<bundled>"

# utf-8-sig: registry exports saved by spreadsheet tools often carry a BOM
ENCODING = "utf-8-sig"


class SourceUnavailableError(PortDescError):
    """Raised when the external CSV source cannot be read."""

    def __init__(self, locator: str, reason: str) -> None:
        self.locator = locator
        self.reason = reason
        super().__init__(f"CSV file cannot be opened - {locator} ({reason})")


def read_source_text(path: str | Path) -> str:
    """Read a registry CSV file from disk.

    Raises:
        SourceUnavailableError: missing file, directory, permission denied,
            or bytes that are not valid UTF-8
    """
    p = Path(path)
    try:
        return p.read_text(encoding=ENCODING)
    except OSError as e:
        raise SourceUnavailableError(str(p), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise SourceUnavailableError(str(p), f"not UTF-8 text: {e.reason}") from e


def read_bundled_text() -> str:
    """Read the registry excerpt shipped inside the package."""
    try:
        return (
            resources.files(ASSETS_PACKAGE)
            .joinpath(BUNDLED_DATASET)
            .read_text(encoding=ENCODING)
        )
    except (OSError, ModuleNotFoundError) as e:
        raise DatasetError(f"bundled dataset {BUNDLED_DATASET} unavailable: {e}") from e
