"""Simple CLI to build a material schedule from a photo on disk."""
import argparse
from pathlib import Path

from bim_schedule.core.logging import configure_logging
from bim_schedule.processing.pipeline import run_pipeline


def build_parser() -> argparse.ArgumentParser:
    """Create a small argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(description="Generate a BIM material schedule from an interior photo")
    parser.add_argument(
        "--image",
        type=Path,
        required=True,
        help="Path to a JPEG or PNG photo of the space",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("output/bim_materials.csv"),
        help="CSV file to write the schedule to",
    )
    parser.add_argument(
        "--sink",
        choices=["csv", "excel"],
        default="csv",
        help="Also write an Excel workbook when set to excel",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        default=None,
        help="Excel file to write when --sink=excel (defaults to the CSV path with .xlsx)",
    )
    parser.add_argument(
        "--no-compress",
        action="store_true",
        help="Send the image as-is instead of resizing it to 1024px first",
    )
    return parser


def main() -> None:
    """Entrypoint for running the pipeline from the command line."""

    configure_logging()
    args = build_parser().parse_args()
    output_path = run_pipeline(
        args.image,
        args.output,
        sink=args.sink,
        excel_path=args.excel_output,
        compress=not args.no_compress,
    )
    print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
