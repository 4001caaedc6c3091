#!/usr/bin/env python3
"""
Export UCENPulse data to a JSON file.

Reads activities and metrics from the configured SQLite store and writes the
same snapshot the dashboard's export button produces.

Usage:
    python scripts/export_data.py
    python scripts/export_data.py --db ./ucenpulse.db --out-dir ./exports
"""
import argparse
import sys
from pathlib import Path

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR / "src"))

from pulse_core.export import build_export, dumps_export, export_filename  # noqa: E402
from pulse_core.storage import SqliteStorage  # noqa: E402
from pulse_core.store import RecordStore  # noqa: E402


def export_store(db_path: Path, out_dir: Path) -> Path:
    """
    Write an export file for the store at ``db_path``.

    Args:
        db_path: SQLite key-value store file
        out_dir: Directory for the export file

    Returns:
        Path of the written file
    """
    store = RecordStore(SqliteStorage(str(db_path))).load(seed_defaults=False)
    document = build_export(store.activities, store.metrics)

    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / export_filename(store.clock(0))
    out_path.write_text(dumps_export(document), encoding="utf-8")
    return out_path


def main():
    parser = argparse.ArgumentParser(
        description="Export UCENPulse activities and metrics as JSON",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=BASE_DIR / "ucenpulse.db",
        help="SQLite store to read (default: ./ucenpulse.db)",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory to write the export into (default: current directory)",
    )
    args = parser.parse_args()

    if not args.db.exists():
        parser.error(f"store not found: {args.db}")

    print("=" * 60)
    print("UCENPulse Data Export")
    print("=" * 60)

    out_path = export_store(args.db, args.out_dir)
    size_kb = out_path.stat().st_size / 1024
    print(f"\nWrote {out_path} ({size_kb:.1f} KB)")


if __name__ == "__main__":
    main()
