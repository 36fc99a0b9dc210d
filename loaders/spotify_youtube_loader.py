"""
spotify_youtube_loader.py - Configuration for loading the Spotify & YouTube CSV

Raw file goes through data_to_csv/spotify_youtube_to_csv.py first.
"""

SOURCE_URL = "https://www.kaggle.com/datasets/salvatorerastelli/spotify-and-youtube"

SOURCE_NAME = "spotify_youtube"

RAW_CSV_PATH = "data/spotify_youtube/Spotify_Youtube.csv"

CSV_PATH = "csvs/spotify_youtube/spotify_tracks.csv"

TABLE = "spotify_tracks"

# Columns of the cleaned CSV, in file order
CSV_COLUMNS = [
    "artist",
    "track",
    "album",
    "album_type",
    "danceability",
    "energy",
    "loudness",
    "speechiness",
    "acousticness",
    "instrumentalness",
    "liveness",
    "valence",
    "tempo",
    "duration_min",
    "title",
    "channel",
    "views",
    "likes",
    "comments",
    "licensed",
    "official_video",
    "stream",
    "energy_liveness",
    "most_played_on",
]

# Staging column types (understood by both PostgreSQL and DuckDB)
COLUMN_TYPES = {
    "artist": "text",
    "track": "text",
    "album": "text",
    "album_type": "text",
    "danceability": "float8",
    "energy": "float8",
    "loudness": "float8",
    "speechiness": "float8",
    "acousticness": "float8",
    "instrumentalness": "float8",
    "liveness": "float8",
    "valence": "float8",
    "tempo": "float8",
    "duration_min": "float8",
    "title": "text",
    "channel": "text",
    "views": "bigint",
    "likes": "bigint",
    "comments": "bigint",
    "licensed": "boolean",
    "official_video": "boolean",
    "stream": "bigint",
    "energy_liveness": "float8",
    "most_played_on": "text",
}

FLOAT_COLUMNS = [c for c, t in COLUMN_TYPES.items() if t == "float8"]
COUNTER_COLUMNS = [c for c, t in COLUMN_TYPES.items() if t == "bigint"]
FLAG_COLUMNS = [c for c, t in COLUMN_TYPES.items() if t == "boolean"]
