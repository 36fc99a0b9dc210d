"""
table_stats.py - Exploratory profile of the loaded spotify_tracks table

Row counts, distinct values and duration bounds: the first look taken at
the data before asking it any real questions.
"""

from typing import Dict, List, Any


class TableStatsAnalyzer:
    def __init__(self, conn, table: str = "spotify_tracks"):
        self.conn = conn
        self.table = table

    def _scalar(self, sql: str):
        result = self.conn.execute(sql).fetchone()
        return result[0] if result else None

    def _count_rows(self) -> int:
        return self._scalar(f"SELECT COUNT(*) FROM {self.table}") or 0

    def _count_distinct(self, column: str) -> int:
        """Count distinct non-null values of a column"""
        return self._scalar(f"SELECT COUNT(DISTINCT {column}) FROM {self.table}") or 0

    def _distinct_values(self, column: str) -> List[Any]:
        rows = self.conn.execute(
            f"SELECT DISTINCT {column} FROM {self.table} WHERE {column} IS NOT NULL ORDER BY {column}"
        ).fetchall()
        return [row[0] for row in rows]

    def _duration_bounds(self) -> Dict[str, Any]:
        row = self.conn.execute(
            f"SELECT MIN(duration_min), MAX(duration_min) FROM {self.table}"
        ).fetchone()
        return {'min_duration_min': row[0], 'max_duration_min': row[1]}

    def _count_zero_duration(self) -> int:
        """Rows with a zero-length track; the cleaning step should have removed them"""
        return self._scalar(f"SELECT COUNT(*) FROM {self.table} WHERE duration_min = 0") or 0

    def _most_played_on_distribution(self) -> Dict[str, int]:
        rows = self.conn.execute(f"""
        SELECT most_played_on, COUNT(*)
        FROM {self.table}
        GROUP BY most_played_on
        ORDER BY most_played_on
        """).fetchall()
        return {platform: count for platform, count in rows}

    def analyze_all(self) -> Dict[str, Any]:
        stats = {}
        stats['total_rows'] = self._count_rows()
        stats['distinct_artists'] = self._count_distinct('artist')
        stats['distinct_albums'] = self._count_distinct('album')
        stats['distinct_channels'] = self._count_distinct('channel')
        stats['album_types'] = self._distinct_values('album_type')
        stats.update(self._duration_bounds())
        stats['zero_duration_rows'] = self._count_zero_duration()
        stats['most_played_on'] = self._most_played_on_distribution()
        return stats

    def print_report(self, stats: Dict[str, Any]):
        print(f"\n=== TABLE PROFILE for {self.table.upper()} ===")
        print(f"Total rows: {stats['total_rows']:,}")
        print(f"Distinct artists: {stats['distinct_artists']:,}")
        print(f"Distinct albums: {stats['distinct_albums']:,}")
        print(f"Distinct channels: {stats['distinct_channels']:,}")
        print(f"Album types: {', '.join(stats['album_types']) or '-'}")
        print()

        print("⏱  DURATION (minutes):")
        if stats['min_duration_min'] is None:
            print("  no durations")
        else:
            print(f"  Shortest: {stats['min_duration_min']:.2f}")
            print(f"  Longest: {stats['max_duration_min']:.2f}")
        if stats['zero_duration_rows']:
            print(f"  ⚠️ Zero-length rows: {stats['zero_duration_rows']:,}")
        print()

        print("📊 MOST PLAYED ON:")
        total = stats['total_rows']
        for platform, count in stats['most_played_on'].items():
            pct = (count / total) * 100 if total else 0
            print(f"  {platform or 'unknown'}: {count:,} ({pct:.1f}%)")


def analyze_table(conn, table: str = "spotify_tracks") -> Dict[str, Any]:
    """Main entry point for the table profile"""
    analyzer = TableStatsAnalyzer(conn, table)
    stats = analyzer.analyze_all()
    analyzer.print_report(stats)
    return stats
