#!/usr/bin/env python3
"""
Generate delimited test data files for reader benchmarks.

Standard test files:
- narrow: rows × 10 cols (3 int, 3 double, 4 string) - Primary benchmark
- wide: rows × 100 cols (mixed) - Tests wide data, where the copy strategy
  only extracts the selected fields and the offset strategy records them all
- matrix_*: integer-only files over a (rows, cols) grid

Every file is written through rowcsv.Writer, so the output is exactly the
unquoted format the reader accepts.

Usage:
    python scripts/generate_test_data.py [output_dir] [--rows N] [--delimiter D]

If output_dir is not specified, defaults to benchmark/test_data/
"""

import argparse
import random
import string
from pathlib import Path

import rowcsv


def random_string(min_len: int = 5, max_len: int = 20) -> str:
    """Generate a random alphanumeric string."""
    length = random.randint(min_len, max_len)
    return ''.join(random.choices(string.ascii_letters + string.digits, k=length))


def write_file(path: Path, headers: list[str], rows, delimiter: str = ",") -> int:
    """Write ``rows`` under ``headers`` to ``path``; return the row count."""
    count = 0
    with rowcsv.Writer() as writer:
        if not writer.open(path, delimiter=delimiter):
            raise OSError(f"cannot write {path}")
        writer.set_column_names(*headers)
        for row in rows:
            if not writer.write_row(*row):
                raise ValueError(f"row {count} does not match {len(headers)} columns")
            count += 1
            if count % 100000 == 0:
                print(f"  {count:,} rows written...")
    return count


def generate_narrow(output_path: Path, nrows: int = 1_000_000, delimiter: str = ",") -> Path:
    """
    Generate narrow.csv: nrows × 10 cols (3 int, 3 double, 4 string).
    Primary benchmark file.
    """
    path = output_path / "narrow.csv"
    print(f"Generating {path.name}...")
    headers = ["int1", "int2", "int3", "dbl1", "dbl2", "dbl3",
               "str1", "str2", "str3", "str4"]

    def rows():
        for _ in range(nrows):
            yield [
                random.randint(-1000000, 1000000),
                random.randint(0, 9999),
                random.randint(-100, 100),
                f"{random.uniform(-1000, 1000):.6f}",
                f"{random.uniform(0, 1):.10f}",
                f"{random.uniform(-1e10, 1e10):.2e}",
                random_string(),
                random_string(1, 10),
                random_string(10, 30),
                random_string(),
            ]

    write_file(path, headers, rows(), delimiter)
    print(f"  Done: {path}")
    return path


def generate_wide(output_path: Path, nrows: int = 100_000, delimiter: str = ",") -> Path:
    """
    Generate wide.csv: nrows × 100 cols (25 int, 25 double, 50 string).
    """
    path = output_path / "wide.csv"
    print(f"Generating {path.name}...")
    headers = [f"int{i}" for i in range(25)]
    headers += [f"dbl{i}" for i in range(25)]
    headers += [f"str{i}" for i in range(50)]

    def rows():
        for _ in range(nrows):
            row = [random.randint(-1000000, 1000000) for _ in range(25)]
            row += [f"{random.uniform(-1000, 1000):.6f}" for _ in range(25)]
            row += [random_string(5, 15) for _ in range(50)]
            yield row

    write_file(path, headers, rows(), delimiter)
    print(f"  Done: {path}")
    return path


def generate_variable_sizes(output_path: Path, scale: float = 1.0, delimiter: str = ",") -> list[Path]:
    """
    Generate integer-only files over the (rows, cols) matrix
    [(10K, 10), (100K, 10), (100K, 100)], rows scaled by ``scale``.
    """
    test_matrix = [
        (10_000, 10, "10k_10c"),
        (100_000, 10, "100k_10c"),
        (100_000, 100, "100k_100c"),
    ]

    paths = []
    for nrows, ncols, name in test_matrix:
        path = output_path / f"matrix_{name}.csv"
        print(f"Generating {path.name}...")
        rows = (
            [random.randint(0, 9999) for _ in range(ncols)]
            for _ in range(max(1, int(nrows * scale)))
        )
        write_file(path, [f"col{i}" for i in range(ncols)], rows, delimiter)
        print(f"  Done: {path}")
        paths.append(path)
    return paths


def main():
    parser = argparse.ArgumentParser(
        description="Generate delimited test data files for reader benchmarks"
    )
    parser.add_argument(
        "output_dir",
        nargs="?",
        default="benchmark/test_data",
        help="Output directory for test files (default: benchmark/test_data/)"
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=1_000_000,
        help="Rows in the narrow file; the wide file gets a tenth (default: 1000000)"
    )
    parser.add_argument(
        "--delimiter",
        default=",",
        help="Field delimiter character (default: ',')"
    )
    parser.add_argument(
        "--matrix-only",
        action="store_true",
        help="Generate only the size matrix files"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)"
    )

    args = parser.parse_args()

    random.seed(args.seed)

    output_path = Path(args.output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    print(f"Output directory: {output_path.absolute()}")
    print(f"Random seed: {args.seed}")
    print()

    scale = args.rows / 1_000_000
    if not args.matrix_only:
        generate_narrow(output_path, args.rows, args.delimiter)
        print()

        generate_wide(output_path, max(1, args.rows // 10), args.delimiter)
        print()

    generate_variable_sizes(output_path, scale, args.delimiter)
    print()

    print("All test files generated successfully!")

    print("\nGenerated files:")
    for f in sorted(output_path.glob("*.csv")):
        size_mb = f.stat().st_size / (1024 * 1024)
        print(f"  {f.name}: {size_mb:.1f}MB")


if __name__ == "__main__":
    main()
