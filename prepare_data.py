import sys
from pathlib import Path

from utils.io import resolve_data_path, parquet_path_for, load_csv_comma, write_parquet
from utils.prep import clean, train_types


def prepare(csv_path: Path, parquet_path: Path) -> int:
    """Validates the CSV against the schema and writes the Parquet cache."""
    print(f"-> Reading {csv_path}...")

    try:
        df = clean(load_csv_comma(csv_path))
    except (FileNotFoundError, ValueError) as e:
        print(f"!! ERROR while loading: {e}")
        return 1

    types = train_types(df)
    print(f"-> {len(df)} rows, {len(types)} train types: {', '.join(types)}")

    out = write_parquet(df, parquet_path)
    print(f"-> Success: Data saved to {out}")
    return 0


if __name__ == "__main__":
    csv_path = Path(sys.argv[1]) if len(sys.argv) > 1 else resolve_data_path()
    parquet_path = Path(sys.argv[2]) if len(sys.argv) > 2 else parquet_path_for(csv_path)
    sys.exit(prepare(csv_path, parquet_path))
