#!/usr/bin/env python3
"""Sample dataset generator for local runs and performance checks.

Writes a CSV in the published-sheet format:
- Header row with the Swedish column names
- Scores with comma decimals ("8,5"), which forces quoting of those cells
- A share of blank scores / ages and fully blank trailing rows

Use the output with ``whisky-board --csv-file <path>``.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

HEADER = [
    "Producent",
    "Whisky",
    "Producent & Whisky",
    "Land",
    "Betyg Genomsnitt",
    "Betyg Johan",
    "Betyg Erik",
    "Ålder",
    "Alk%",
]

PRODUCERS = ["Macallan", "Lagavulin", "Ardbeg", "Glenfiddich", "Yamazaki", "Mackmyra", "Kavalan", "Redbreast"]
COUNTRIES = ["Scotland", "Scotland", "Scotland", "Scotland", "Japan", "Sverige", "Taiwan", "Ireland"]
EXPRESSIONS = ["12 Year", "16 Year", "Uigeadail", "Distiller's Edition", "Svensk Ek", "Solist, Vinho", "Cask \"No. 5\""]


def _comma(value: float) -> str:
    return f"{value:.1f}".replace(".", ",")


def generate_sample_frame(rows: int, seed: int = 42, blank_ratio: float = 0.1) -> pd.DataFrame:
    """Generate ``rows`` tasting records as a DataFrame of strings.

    Args:
        rows: Number of data rows
        seed: Random seed for reproducible data
        blank_ratio: Share of score/age cells left empty
    """
    rng = np.random.default_rng(seed)
    idx = rng.integers(0, len(PRODUCERS), rows)
    expr = rng.integers(0, len(EXPRESSIONS), rows)
    johan = np.round(rng.uniform(4, 10, rows), 1)
    erik = np.round(rng.uniform(4, 10, rows), 1)
    ages = rng.choice([0, 10, 12, 16, 18, 21], rows)
    abv = np.round(rng.uniform(40, 60, rows), 1)

    def maybe(text: str) -> str:
        return "" if rng.random() < blank_ratio else text

    data = []
    for i in range(rows):
        producer = PRODUCERS[idx[i]]
        whisky = EXPRESSIONS[expr[i]]
        data.append([
            producer,
            whisky,
            "",
            COUNTRIES[idx[i]],
            maybe(_comma((johan[i] + erik[i]) / 2)),
            maybe(_comma(johan[i])),
            maybe(_comma(erik[i])),
            maybe(str(ages[i])) if ages[i] else "",
            _comma(abv[i]),
        ])
    return pd.DataFrame(data, columns=HEADER)


def generate_sample_csv_text(rows: int, seed: int = 42, trailing_blank_lines: int = 2) -> str:
    """Render the sample frame as CRLF CSV text with blank trailing rows."""
    df = generate_sample_frame(rows, seed)
    text = df.to_csv(index=False, lineterminator="\r\n")
    return text + "\r\n" * trailing_blank_lines


def write_sample_csv(output_path: Path, rows: int, seed: int = 42, trailing_blank_lines: int = 2) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    text = generate_sample_csv_text(rows, seed, trailing_blank_lines)
    output_path.write_text(text, encoding="utf-8")
    print(f"Created CSV file: {output_path}")
    print(f"  Rows: {rows} (+ header)")
    print(f"  Columns: {len(HEADER)}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic whisky tasting CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s data/sample.csv
  %(prog)s data/large.csv --rows 20000 --seed 7
        """,
    )
    parser.add_argument("output", type=Path, help="Output CSV file path")
    parser.add_argument("--rows", type=int, default=200, help="Number of data rows (default: 200)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1

    write_sample_csv(args.output, args.rows, args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
