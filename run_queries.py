#!/usr/bin/env python
"""
run_queries.py - Ask the spotify_tracks table the catalog questions

Usage: python run_queries.py --level advanced
       python run_queries.py --name top_energy_tracks --name single_tracks
"""

import argparse

from db_utils import get_db_connection
from loaders.spotify_youtube_loader import TABLE
from queries.catalog import LEVELS, QUERIES, list_queries
from queries.runner import run_and_print


def select_names(levels=None, names=None):
    """Catalog names to run: explicit names win, then levels, else everything"""
    if names:
        unknown = [n for n in names if n not in QUERIES]
        if unknown:
            raise ValueError(f"Unknown query: {', '.join(unknown)}")
        return list(names)
    if levels:
        return [n for level in levels for n in list_queries(level)]
    return list_queries()


def print_catalog():
    for level in LEVELS:
        print(f"\n{level.upper()}")
        for name in list_queries(level):
            print(f"  {name:<30} {QUERIES[name]['question']}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the analytical queries against spotify_tracks")
    parser.add_argument("--list", action="store_true", help="show the catalog and exit")
    parser.add_argument("--level", action="append", choices=LEVELS)
    parser.add_argument("--name", action="append")
    parser.add_argument("--max-rows", type=int, default=20)
    args = parser.parse_args(argv)

    if args.list:
        print_catalog()
        return

    names = select_names(args.level, args.name)
    with get_db_connection() as conn:
        run_and_print(conn, names, table=TABLE, max_rows=args.max_rows)


if __name__ == "__main__":
    main()
