#!/usr/bin/env python
"""
profile_table.py - Print the exploratory profile of spotify_tracks
"""

from db_utils import get_db_connection
from loaders.spotify_youtube_loader import TABLE
from stats.table_stats import analyze_table


if __name__ == "__main__":
    with get_db_connection() as conn:
        analyze_table(conn, TABLE)
