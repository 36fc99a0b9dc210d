#!/usr/bin/env python
"""
index_benchmark.py - Show what CREATE INDEX idx_artist does to an artist lookup

Usage: python index_benchmark.py --artist Gorillaz --runs 5
"""

import argparse

from db_utils import get_db_connection
from loaders.spotify_youtube_loader import TABLE
from stats.explain_stats import benchmark_index


def main(argv=None):
    parser = argparse.ArgumentParser(description="EXPLAIN ANALYZE an artist lookup before and after indexing")
    parser.add_argument("--artist", default="Gorillaz")
    parser.add_argument("--runs", type=int, default=3)
    parser.add_argument("--keep-index", action="store_true")
    args = parser.parse_args(argv)

    with get_db_connection() as conn:
        benchmark_index(conn, artist=args.artist, runs=args.runs, keep_index=args.keep_index, table=TABLE)


if __name__ == "__main__":
    main()
