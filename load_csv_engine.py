#!/usr/bin/env python
"""
load_csv_engine.py - CSV → PostgreSQL loader for the spotify_tracks table

Usage: python load_csv_engine.py --init --file csvs/spotify_youtube/spotify_tracks.csv
"""

import sys, pathlib, time, argparse
from datetime import datetime, timezone

from db_utils import get_db_connection
from loaders import spotify_youtube_loader as loader


def build_staging_ddl(columns, column_types):
    """Build DDL for staging table based on CSV columns"""
    cols = []
    for col in columns:
        # Anything not typed explicitly lands as text
        col_type = column_types.get(col, "text")
        cols.append(f"{col} {col_type}")
    return ", ".join(cols)


def build_insert_sql(table, staging_table, columns):
    """Copy every staging row into the main table, stamping provenance"""
    col_list = ", ".join(columns)
    return f"""
INSERT INTO {table} ({col_list}, source_name, ingested_at)
SELECT {col_list}, %s, %s::timestamptz
FROM {staging_table}
"""


class CSVLoader:
    def __init__(self, csv_path, columns, column_types, table, source_name="UNKNOWN"):
        self.csv_path = pathlib.Path(csv_path)
        self.columns = list(columns)
        self.column_types = column_types
        self.table = table
        self.staging_table = f"staging_{table}"
        self.source_name = source_name
        self.timestamp = datetime.now(timezone.utc)

    def _count(self, conn, table):
        result = conn.execute(f"SELECT count(*) FROM {table}").fetchone()
        return result[0] if result else 0

    def copy_to_staging(self, conn):
        """Recreate the staging table and COPY the CSV into it"""
        conn.execute(f"DROP TABLE IF EXISTS {self.staging_table};")
        conn.execute(
            f"CREATE UNLOGGED TABLE {self.staging_table} "
            f"({build_staging_ddl(self.columns, self.column_types)});"
        )
        with conn.cursor() as cur:
            col_list = ", ".join(self.columns)
            with cur.copy(
                f"COPY {self.staging_table} ({col_list}) FROM STDIN WITH CSV HEADER"
            ) as copy:
                with open(self.csv_path, "rb") as f:
                    while data := f.read(1048576):
                        copy.write(data)
        rows_in_staging = self._count(conn, self.staging_table)
        print(f"[DEBUG] Copied {rows_in_staging:,} → {self.staging_table}")
        return rows_in_staging

    def load(self, conn=None, replace=False, confirm=True):
        """Main loading logic. Returns the number of rows added to the main table."""
        if conn is None:
            with get_db_connection() as own_conn:
                return self.load(own_conn, replace=replace, confirm=confirm)

        print(f"[INFO] Loading {self.table} from {self.csv_path.name} (source: {self.source_name})")
        t0 = time.time()

        try:
            self.copy_to_staging(conn)
        except Exception as e:
            conn.rollback()
            print(f"[ERROR] COPY failed: {type(e).__name__}: {e}")
            raise

        try:
            if replace:
                print(f"[INFO] Truncating {self.table}")
                conn.execute(f"TRUNCATE {self.table} RESTART IDENTITY")
            before = self._count(conn, self.table)
            conn.execute(
                build_insert_sql(self.table, self.staging_table, self.columns),
                (self.source_name, self.timestamp.isoformat()),
            )
            after = self._count(conn, self.table)
            conn.execute(f"DROP TABLE IF EXISTS {self.staging_table};")
        except Exception as e:
            conn.rollback()
            print(f"[ERROR] Insert failed and rolled back: {type(e).__name__}: {e}")
            raise

        elapsed = time.time() - t0
        if confirm:
            response = input(f"\nCommit +{after - before:,} rows into {self.table}? (y/N): ").strip().lower()
            if response not in ["y", "yes"]:
                conn.rollback()
                print("✗ Load rolled back.")
                return 0

        conn.commit()
        print(f"✓ {self.csv_path.name}: +{after - before:,} rows | {elapsed:.1f}s | source '{self.source_name}'")
        return after - before


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load the cleaned Spotify & YouTube CSV into PostgreSQL")
    parser.add_argument("--file", default=loader.CSV_PATH)
    parser.add_argument("--init", action="store_true", help="create the spotify_tracks table first")
    parser.add_argument("--replace", action="store_true", help="truncate the table before loading")
    parser.add_argument("--yes", action="store_true", help="commit without asking")
    args = parser.parse_args(argv)

    if not pathlib.Path(args.file).exists():
        sys.exit(f"CSV not found: {args.file} (run data_to_csv/spotify_youtube_to_csv.py first)")

    if args.init:
        from models import init_db
        init_db()

    csv_loader = CSVLoader(
        csv_path=args.file,
        columns=loader.CSV_COLUMNS,
        column_types=loader.COLUMN_TYPES,
        table=loader.TABLE,
        source_name=loader.SOURCE_NAME,
    )
    csv_loader.load(replace=args.replace, confirm=not args.yes)


if __name__ == "__main__":
    main()
