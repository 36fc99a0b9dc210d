"""
runner.py - Execute catalog queries and print what comes back
"""

import time
import pandas as pd

from .catalog import QUERIES, get_query


def run_sql(conn, sql, params=None):
    """Run one statement, return (column names, rows)"""
    cur = conn.execute(sql, params) if params is not None else conn.execute(sql)
    columns = [d[0] for d in cur.description] if cur.description else []
    rows = cur.fetchall() if columns else []
    return columns, rows


def run_query(conn, name, table="spotify_tracks"):
    return run_sql(conn, get_query(name, table))


def to_dataframe(columns, rows) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=columns)


def print_result(name, columns, rows, max_rows=20, elapsed=None):
    """Print a titled table of the first max_rows rows"""
    entry = QUERIES.get(name, {})
    print(f"\n=== {name} [{entry.get('level', '?')}] ===")
    if entry:
        print(entry["question"])
    if not rows:
        print("(no rows)")
    else:
        df = to_dataframe(columns, rows)
        print(df.head(max_rows).to_string(index=False))
        if len(rows) > max_rows:
            print(f"... {len(rows) - max_rows:,} more rows")
    footer = f"{len(rows):,} rows"
    if elapsed is not None:
        footer += f" | {elapsed * 1000:.1f} ms"
    print(footer)


def run_and_print(conn, names, table="spotify_tracks", max_rows=20):
    """Run several catalog entries in order, printing each. Returns {name: row count}."""
    counts = {}
    for name in names:
        t0 = time.time()
        try:
            columns, rows = run_query(conn, name, table)
        except Exception as e:
            print(f"[ERROR] {name} failed: {type(e).__name__}: {e}")
            raise
        print_result(name, columns, rows, max_rows=max_rows, elapsed=time.time() - t0)
        counts[name] = len(rows)
    return counts
