"""
catalog.py - The analytical questions asked of the spotify_tracks table

Each entry is plain SELECT SQL with a {table} placeholder. Levels go from
simple filters (easy) through grouping and subqueries (medium) to window
functions and CTEs (advanced).
"""

LEVELS = ["easy", "medium", "advanced"]

QUERIES = {
    # ────────────────────────────── easy
    "billion_stream_tracks": dict(
        level="easy",
        question="Tracks with more than 1 billion streams",
        sql="""
SELECT track, artist, stream
FROM {table}
WHERE stream > 1000000000
ORDER BY stream DESC, track
""",
    ),
    "albums_with_artists": dict(
        level="easy",
        question="All albums along with their respective artists",
        sql="""
SELECT DISTINCT album, artist
FROM {table}
ORDER BY album, artist
""",
    ),
    "licensed_comments_total": dict(
        level="easy",
        question="Total number of comments for licensed tracks",
        sql="""
SELECT SUM(comments) AS total_comments
FROM {table}
WHERE licensed = TRUE
""",
    ),
    "single_tracks": dict(
        level="easy",
        question="Tracks that belong to the album type single",
        sql="""
SELECT track, artist, album
FROM {table}
WHERE album_type = 'single'
ORDER BY track, artist
""",
    ),
    "tracks_per_artist": dict(
        level="easy",
        question="Total number of tracks by each artist",
        sql="""
SELECT artist, COUNT(*) AS total_tracks
FROM {table}
GROUP BY artist
ORDER BY total_tracks DESC, artist
""",
    ),

    # ────────────────────────────── medium
    "avg_danceability_per_album": dict(
        level="medium",
        question="Average danceability of tracks in each album",
        sql="""
SELECT album, AVG(danceability) AS avg_danceability
FROM {table}
GROUP BY album
ORDER BY avg_danceability DESC, album
""",
    ),
    "top_energy_tracks": dict(
        level="medium",
        question="Top 5 tracks with the highest energy values",
        sql="""
SELECT track, MAX(energy) AS max_energy
FROM {table}
GROUP BY track
ORDER BY max_energy DESC, track
LIMIT 5
""",
    ),
    "official_video_engagement": dict(
        level="medium",
        question="Views and likes of tracks that have an official video",
        sql="""
SELECT track, SUM(views) AS total_views, SUM(likes) AS total_likes
FROM {table}
WHERE official_video = TRUE
GROUP BY track
ORDER BY total_views DESC, track
""",
    ),
    "album_total_views": dict(
        level="medium",
        question="Total views of all tracks of each album",
        sql="""
SELECT album, SUM(views) AS total_views
FROM {table}
GROUP BY album
ORDER BY total_views DESC, album
""",
    ),
    # Tracks never played on YouTube have nothing to compare against and are left out
    "spotify_over_youtube": dict(
        level="medium",
        question="Tracks streamed more on Spotify than on YouTube",
        sql="""
SELECT track, streamed_on_spotify, streamed_on_youtube
FROM (
    SELECT track,
           COALESCE(SUM(CASE WHEN most_played_on = 'Spotify' THEN stream END), 0) AS streamed_on_spotify,
           COALESCE(SUM(CASE WHEN most_played_on = 'Youtube' THEN stream END), 0) AS streamed_on_youtube
    FROM {table}
    GROUP BY track
) AS per_platform
WHERE streamed_on_spotify > streamed_on_youtube
  AND streamed_on_youtube <> 0
ORDER BY track
""",
    ),

    # ────────────────────────────── advanced
    "top_viewed_per_artist": dict(
        level="advanced",
        question="Top 3 most-viewed tracks for each artist",
        sql="""
WITH ranked AS (
    SELECT artist, track, SUM(views) AS total_views,
           DENSE_RANK() OVER (PARTITION BY artist ORDER BY SUM(views) DESC) AS view_rank
    FROM {table}
    GROUP BY artist, track
)
SELECT artist, track, total_views, view_rank
FROM ranked
WHERE view_rank <= 3
ORDER BY artist, view_rank, track
""",
    ),
    "above_avg_liveness": dict(
        level="advanced",
        question="Tracks whose liveness score is above the average",
        sql="""
SELECT track, artist, liveness
FROM {table}
WHERE liveness > (SELECT AVG(liveness) FROM {table})
ORDER BY liveness DESC, track
""",
    ),
    "album_energy_spread": dict(
        level="advanced",
        question="Difference between the highest and lowest energy in each album",
        sql="""
WITH album_energy AS (
    SELECT album, MAX(energy) AS highest_energy, MIN(energy) AS lowest_energy
    FROM {table}
    GROUP BY album
)
SELECT album, highest_energy - lowest_energy AS energy_diff
FROM album_energy
ORDER BY energy_diff DESC, album
""",
    ),
    "high_energy_liveness_ratio": dict(
        level="advanced",
        question="Tracks where the energy-to-liveness ratio is greater than 1.2",
        sql="""
SELECT track, artist, energy, liveness,
       CAST(energy / NULLIF(liveness, 0) AS DECIMAL(10, 2)) AS energy_liveness_ratio
FROM {table}
WHERE energy / NULLIF(liveness, 0) > 1.2
ORDER BY energy_liveness_ratio DESC, track
""",
    ),
    # ROWS frame with track as tie-breaker: tied views get separate running totals, not one shared peer total
    "cumulative_likes_by_views": dict(
        level="advanced",
        question="Cumulative sum of likes for tracks ordered by views",
        sql="""
SELECT track, views, likes,
       SUM(likes) OVER (
           ORDER BY views, track
           ROWS BETWEEN UNBOUNDED PRECEDING AND CURRENT ROW
       ) AS cumulative_likes
FROM {table}
ORDER BY views, track
""",
    ),
}


def get_query(name: str, table: str = "spotify_tracks") -> str:
    """Get the SQL for a catalog entry"""
    if name not in QUERIES:
        raise KeyError(f"Unknown query: {name}")
    return QUERIES[name]["sql"].format(table=table)


def list_queries(level: str | None = None) -> list[str]:
    """Names of the catalog entries, optionally for one level only"""
    if level is None:
        return list(QUERIES)
    if level not in LEVELS:
        raise ValueError(f"Unknown level: {level} (expected one of {', '.join(LEVELS)})")
    return [name for name, q in QUERIES.items() if q["level"] == level]
