from __future__ import annotations

import csv
import io
import logging

import pandas as pd

from ..models.port_entry import PortEntry
from ..models.transport_protocol import TransportProtocol

"""Registry CSV reader.

First line is the header, every following non-blank line is a data row.
Header names are resolved by exact (case-sensitive) match; column order is
irrelevant and extra columns are ignored.

Tolerance is per field: an unparsable port number or protocol becomes None.
Anything that breaks the table itself (missing header column, a row whose
field count differs from the header, bad quoting) rejects the whole document
with DatasetError.
"""

__all__ = [
    "IANA_REGISTRY_URL",
    "REQUIRED_COLUMNS",
    "PortDescError",
    "DatasetError",
    "MissingColumnsError",
    "MalformedRowError",
    "read_csv_text",
    "normalize_records",
    "parse_records",
]

logger = logging.getLogger(__name__)

IANA_REGISTRY_URL = (
    "https://www.iana.org/assignments/service-names-port-numbers/"
    "service-names-port-numbers.xhtml"
)

COL_SERVICE_NAME = "Service Name"
COL_PORT_NUMBER = "Port Number"
COL_TRANSPORT_PROTOCOL = "Transport Protocol"
COL_DESCRIPTION = "Description"

REQUIRED_COLUMNS = (
    COL_SERVICE_NAME,
    COL_PORT_NUMBER,
    COL_TRANSPORT_PROTOCOL,
    COL_DESCRIPTION,
)

MAX_PORT_NUMBER = 65535

_PORT_PATTERN = r"\+?[0-9]+"
_PROTOCOLS_BY_NAME = {p.value: p for p in TransportProtocol}


class PortDescError(Exception):
    """Base class for registry construction failures."""


class DatasetError(PortDescError):
    """Raised when the registry text is readable but structurally unparsable."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(
            f"CSV file cannot be parsed ({detail}). "
            f"Please try to download a new one from here: {IANA_REGISTRY_URL}"
        )


class MissingColumnsError(DatasetError):
    """Raised when required columns are missing from the header row."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"missing columns: {missing}")


class MalformedRowError(DatasetError):
    """Raised when a row does not line up with the header."""


def read_csv_text(text: str) -> pd.DataFrame:
    """Tokenize registry text into a DataFrame of string cells.

    The header row becomes the column labels (duplicates kept as-is). Every
    cell stays text: no NA conversion, so "" or "NA" are ordinary values.
    pandas' own tokenizer pads short rows silently, so the rows are split
    with the csv module in strict mode and the width is checked here.
    """
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    try:
        rows = [row for row in reader if row]
    except csv.Error as e:
        raise MalformedRowError(f"line {reader.line_num}: {e}") from e
    if not rows:
        raise DatasetError("no header row")

    header, data = rows[0], rows[1:]
    width = len(header)
    for number, row in enumerate(data, start=1):
        if len(row) != width:
            raise MalformedRowError(
                f"data row {number} has {len(row)} fields, header has {width}"
            )
    return pd.DataFrame(data, columns=header, dtype=str)


def normalize_records(df: pd.DataFrame) -> list[PortEntry]:
    """Turn a registry DataFrame into PortEntry records.

    Steps:
    1. Validate the required columns are present
    2. Parse port cells: optional "+" then digits, 0..65535, otherwise None
    3. Parse protocol cells: lowercased tcp|udp|sctp|dccp, otherwise None
    4. Build one PortEntry per row, in source order
    """
    columns = [str(c) for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in columns]
    if missing:
        raise MissingColumnsError(missing)

    # first occurrence wins when a header name is repeated
    def column(name: str) -> pd.Series:
        return df.iloc[:, columns.index(name)]

    # object dtype keeps the string-dtype NA semantics of newer pandas out of the way
    port_cells = column(COL_PORT_NUMBER).astype(object)
    digits = port_cells.str.fullmatch(_PORT_PATTERN, na=False)
    numeric = pd.to_numeric(port_cells.str.removeprefix("+").where(digits), errors="coerce")
    ports = numeric.where(numeric <= MAX_PORT_NUMBER)

    protocols = column(COL_TRANSPORT_PROTOCOL).astype(object).str.lower().map(_PROTOCOLS_BY_NAME)

    records: list[PortEntry] = []
    for service_name, port, protocol, description in zip(
        column(COL_SERVICE_NAME).tolist(),
        ports.tolist(),
        protocols.tolist(),
        column(COL_DESCRIPTION).tolist(),
        strict=True,
    ):
        records.append(
            PortEntry(
                service_name=service_name,
                port_number=None if pd.isna(port) else int(port),
                transport_protocol=None if pd.isna(protocol) else protocol,
                description=description,
            )
        )
    return records


def parse_records(text: str) -> list[PortEntry]:
    """Parse registry CSV text into PortEntry records (whole document or nothing)."""
    records = normalize_records(read_csv_text(text))
    logger.debug(f"parsed {len(records)} rows")
    return records
