# scripts/generate_sample_files.py
"""
Write sample-attendance.xlsx and sample-attendance.csv for one month.

Run with: python -m scripts.generate_sample_files [output_dir] [year] [month]
"""
import sys
from pathlib import Path

from utils.excel_utils import generate_sample_csv, generate_sample_excel, generate_sample_rows


def generate(output_dir: Path, year: int, month: int):
    output_dir.mkdir(parents=True, exist_ok=True)
    rows = generate_sample_rows(year=year, month=month)

    excel_path = output_dir / "sample-attendance.xlsx"
    excel_path.write_bytes(generate_sample_excel(rows).getvalue())

    csv_path = output_dir / "sample-attendance.csv"
    csv_path.write_bytes(generate_sample_csv(rows).getvalue())

    print(f"Generated {excel_path} and {csv_path} ({len(rows)} records)")


if __name__ == "__main__":
    args = sys.argv[1:]
    out = Path(args[0]) if args else Path("public")
    year = int(args[1]) if len(args) > 1 else 2024
    month = int(args[2]) if len(args) > 2 else 1
    generate(out, year, month)
