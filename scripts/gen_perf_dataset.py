#!/usr/bin/env python3
"""Dataset generation script for load-time experiments.

Generates a synthetic registry CSV shaped like the IANA
service-names-port-numbers export (same 12 columns, same header names):
- mostly single-port rows over tcp/udp/sctp/dccp
- a share of range rows ("6000-6063") and blank-port service-only rows
- a share of rows with an unrecognised protocol cell
Duplicate (protocol, port) slots occur naturally from random draws.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

HEADER = [
    "Service Name",
    "Port Number",
    "Transport Protocol",
    "Description",
    "Assignee",
    "Contact",
    "Registration Date",
    "Modification Date",
    "Reference",
    "Service Code",
    "Unauthorized Use Reported",
    "Assignment Notes",
]

PROTOCOLS = ["tcp", "udp", "sctp", "dccp"]


def generate_registry_frame(
    rows: int,
    seed: int = 42,
    range_ratio: float = 0.05,
    blank_ratio: float = 0.05,
    bad_protocol_ratio: float = 0.02,
) -> pd.DataFrame:
    """Generate a synthetic registry DataFrame (all cells as strings).

    Args:
        rows: Number of data rows
        seed: Random seed for reproducible data
        range_ratio: Share of rows whose port cell is a range
        blank_ratio: Share of rows with an empty port cell
        bad_protocol_ratio: Share of rows with an unrecognised protocol

    Returns:
        DataFrame with the registry header as columns
    """
    rng = np.random.default_rng(seed)

    ports = rng.integers(0, 65536, rows)
    port_cells = ports.astype(str).astype(object)
    kind = rng.random(rows)
    is_range = kind < range_ratio
    is_blank = (kind >= range_ratio) & (kind < range_ratio + blank_ratio)
    upper = np.minimum(ports + rng.integers(1, 64, rows), 65535)
    port_cells[is_range] = [f"{lo}-{hi}" for lo, hi in zip(ports[is_range], upper[is_range])]
    port_cells[is_blank] = ""

    protocols = rng.choice(PROTOCOLS, rows).astype(object)
    bad = rng.random(rows) < bad_protocol_ratio
    protocols[bad] = "tcp-mux"

    names = [f"svc-{i:06d}" for i in range(rows)]
    data = {column: [""] * rows for column in HEADER}
    data["Service Name"] = names
    data["Port Number"] = port_cells.tolist()
    data["Transport Protocol"] = protocols.tolist()
    data["Description"] = [f"Synthetic service {name}" for name in names]
    return pd.DataFrame(data, columns=HEADER)


def write_registry_csv(output_path: Path, rows: int, seed: int = 42) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    generate_registry_frame(rows, seed).to_csv(output_path, index=False)
    print(f"Created registry CSV: {output_path}")
    print(f"  Rows: {rows:,} (+ 1 header row)")


def main() -> int:
    """Main CLI interface for dataset generation."""
    parser = argparse.ArgumentParser(
        description="Generate synthetic registry CSV datasets for load-time tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate default 50k rows
  %(prog)s registry.csv

  # Generate a larger dataset with a fixed seed
  %(prog)s large.csv --rows 200000 --seed 123
        """,
    )
    parser.add_argument("output", type=Path, help="Output CSV file path")
    parser.add_argument(
        "--rows",
        type=int,
        default=50_000,
        help="Number of data rows (default: 50,000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducible data (default: 42)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be generated without creating files",
    )
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1

    print("Dataset generation plan:")
    print(f"  Output file: {args.output}")
    print(f"  Rows: {args.rows:,}")
    print(f"  Random seed: {args.seed}")

    if args.dry_run:
        print("\n[DRY RUN] Would generate files but not creating them.")
        return 0

    try:
        write_registry_csv(args.output, args.rows, args.seed)
    except OSError as e:
        print(f"\nError generating dataset: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
