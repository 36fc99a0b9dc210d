"""
explain_stats.py - Before/after index timings with EXPLAIN ANALYZE

Runs one artist lookup against spotify_tracks without an index on artist,
creates idx_artist, runs it again, and reports how the plan and the
planning/execution times changed.
"""

import json
import statistics
from typing import Dict, List, Any
from psycopg import sql


BENCHMARK_SQL = """
SELECT artist, track, views
FROM {table}
WHERE artist = {artist}
  AND most_played_on = 'Youtube'
ORDER BY stream DESC
LIMIT 25
"""


def build_benchmark_query(artist: str, table: str = "spotify_tracks") -> sql.Composed:
    return sql.SQL(BENCHMARK_SQL).format(table=sql.Identifier(table), artist=sql.Literal(artist))


def _walk_plan(node: Dict[str, Any], node_types: List[str], index_names: List[str]):
    node_types.append(node["Node Type"])
    if "Index Name" in node:
        index_names.append(node["Index Name"])
    for child in node.get("Plans", []):
        _walk_plan(child, node_types, index_names)


def parse_explain(result) -> Dict[str, Any]:
    """Summarise EXPLAIN (ANALYZE, FORMAT JSON) output.

    Accepts the JSON text or the already decoded list psycopg hands back.
    """
    if isinstance(result, (str, bytes)):
        result = json.loads(result)
    if isinstance(result, list):
        result = result[0]
    plan = result["Plan"]
    node_types, index_names = [], []
    _walk_plan(plan, node_types, index_names)
    return {
        'planning_ms': result.get("Planning Time"),
        'execution_ms': result.get("Execution Time"),
        'node_type': plan["Node Type"],
        'node_types': node_types,
        'index_names': index_names,
        'actual_rows': plan.get("Actual Rows"),
    }


class IndexBenchmark:
    def __init__(self, conn, artist: str = "Gorillaz", table: str = "spotify_tracks",
                 index_name: str = "idx_artist", column: str = "artist", runs: int = 3):
        if runs < 1:
            raise ValueError(f"runs must be at least 1, got {runs}")
        self.conn = conn
        self.artist = artist
        self.table = table
        self.index_name = index_name
        self.column = column
        self.runs = runs
        self.query = build_benchmark_query(artist, table)

    def _explain_once(self) -> Dict[str, Any]:
        row = self.conn.execute(sql.SQL("EXPLAIN (ANALYZE, FORMAT JSON) ") + self.query).fetchone()
        return parse_explain(row[0])

    def explain(self) -> Dict[str, Any]:
        """Run EXPLAIN ANALYZE `runs` times, keep the last plan and the median timings"""
        results = [self._explain_once() for _ in range(self.runs)]
        summary = dict(results[-1])
        summary['planning_ms'] = statistics.median(r['planning_ms'] or 0 for r in results)
        summary['execution_ms'] = statistics.median(r['execution_ms'] or 0 for r in results)
        return summary

    def drop_index(self):
        self.conn.execute(sql.SQL("DROP INDEX IF EXISTS {}").format(sql.Identifier(self.index_name)))

    def create_index(self):
        print(f"[INFO] CREATE INDEX {self.index_name} ON {self.table}({self.column})")
        self.conn.execute(sql.SQL("CREATE INDEX {} ON {} ({})").format(
            sql.Identifier(self.index_name), sql.Identifier(self.table), sql.Identifier(self.column)))
        # fresh statistics so the planner sees the new index
        self.conn.execute(sql.SQL("ANALYZE {}").format(sql.Identifier(self.table)))

    def run(self, keep_index: bool = False) -> Dict[str, Any]:
        try:
            self.drop_index()
            print(f"[DEBUG] Measuring without {self.index_name} ({self.runs} runs)...")
            before = self.explain()
            self.create_index()
            print(f"[DEBUG] Measuring with {self.index_name} ({self.runs} runs)...")
            after = self.explain()
            if not keep_index:
                self.drop_index()
            self.conn.commit()
        except Exception as e:
            self.conn.rollback()
            print(f"[ERROR] Index benchmark failed: {type(e).__name__}: {e}")
            raise

        speedup = None
        if after['execution_ms']:
            speedup = before['execution_ms'] / after['execution_ms']
        return {'before': before, 'after': after, 'speedup': speedup, 'index_kept': keep_index}

    def print_report(self, stats: Dict[str, Any]):
        before, after = stats['before'], stats['after']
        print(f"\n=== INDEX BENCHMARK: {self.index_name} ON {self.table}({self.column}) ===")
        print(f"Lookup artist: {self.artist}")
        print()
        print(f"{'':<18} {'before':>12} {'after':>12}")
        print("-" * 44)
        print(f"{'Planning (ms)':<18} {before['planning_ms']:>12.3f} {after['planning_ms']:>12.3f}")
        print(f"{'Execution (ms)':<18} {before['execution_ms']:>12.3f} {after['execution_ms']:>12.3f}")
        print(f"{'Root node':<18} {before['node_type']:>12} {after['node_type']:>12}")
        print(f"{'Rows':<18} {before['actual_rows'] or 0:>12,} {after['actual_rows'] or 0:>12,}")
        print()
        print(f"Scans before: {' → '.join(before['node_types'])}")
        print(f"Scans after:  {' → '.join(after['node_types'])}")
        if after['index_names']:
            print(f"✓ Planner used {', '.join(sorted(set(after['index_names'])))}")
        else:
            print(f"✗ Planner did not use {self.index_name} (table may be too small)")
        if stats['speedup'] is not None:
            print(f"📈 Execution speedup: {stats['speedup']:.1f}x")
        if not stats['index_kept']:
            print(f"[INFO] {self.index_name} dropped again (use --keep-index to keep it)")


def benchmark_index(conn, artist: str = "Gorillaz", runs: int = 3, keep_index: bool = False,
                    table: str = "spotify_tracks") -> Dict[str, Any]:
    """Main entry point for the index before/after comparison"""
    bench = IndexBenchmark(conn, artist=artist, table=table, runs=runs)
    stats = bench.run(keep_index=keep_index)
    bench.print_report(stats)
    return stats
