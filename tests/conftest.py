import duckdb
import pandas as pd
import pytest

from load_csv_engine import build_staging_ddl
from loaders.spotify_youtube_loader import CSV_COLUMNS, COLUMN_TYPES

# artist, track, album, album_type, danceability, energy, liveness,
# views, likes, comments, licensed, official_video, stream, most_played_on, channel, duration_min
SAMPLE_TRACKS = [
    ("Gorillaz", "Feel Good Inc.", "Demon Days", "album", 0.818, 0.705, 0.0772,
     693555221, 6220896, 169907, True, True, 1040234854, "Spotify", "Gorillaz", 3.71),
    ("Gorillaz", "Rhinestone Eyes", "Plastic Beach", "album", 0.676, 0.703, 0.0464,
     72011645, 1079128, 31003, True, True, 310083733, "Spotify", "Gorillaz", 3.34),
    ("Gorillaz", "New Gold", "New Gold", "single", 0.695, 0.923, 0.1,
     8435055, 282142, 7399, True, True, 63063467, "Spotify", "Gorillaz", 3.59),
    ("Gorillaz", "On Melancholy Hill", "Plastic Beach", "album", 0.689, 0.625, 0.0919,
     211754952, 1788577, 55229, True, True, 434663559, "Spotify", "Gorillaz", 3.89),
    ("Luis Fonsi", "Despacito", "VIDA", "album", 0.655, 0.797, 0.067,
     8079649362, 50788652, 4252791, True, True, 1506598034, "Youtube", "Luis Fonsi", 3.81),
    ("Tribute Band", "Feel Good Inc.", "Covers Vol. 1", "compilation", 0.7, 0.5, 0.5,
     9000000, 90000, 1000, False, False, 5000000, "Youtube", "Tribute Band TV", 3.70),
    ("Tribute Band", "Despacito", "Covers Vol. 1", "compilation", 0.6, 0.4, 0.8,
     50000000, 400000, 2000, False, False, 100000000, "Spotify", "Tribute Band TV", 3.80),
]


def _full_row(sample):
    (artist, track, album, album_type, danceability, energy, liveness, views, likes,
     comments, licensed, official_video, stream, most_played_on, channel, duration_min) = sample
    row = dict.fromkeys(CSV_COLUMNS)
    row.update(
        artist=artist, track=track, album=album, album_type=album_type,
        danceability=danceability, energy=energy, loudness=-6.0, speechiness=0.05,
        acousticness=0.1, instrumentalness=0.0, liveness=liveness, valence=0.5,
        tempo=120.0, duration_min=duration_min, title=f"{artist} - {track}",
        channel=channel, views=views, likes=likes, comments=comments,
        licensed=licensed, official_video=official_video, stream=stream,
        energy_liveness=energy / liveness, most_played_on=most_played_on,
    )
    return [row[c] for c in CSV_COLUMNS]


@pytest.fixture
def duck():
    """In-memory DuckDB holding a small spotify_tracks table"""
    conn = duckdb.connect(":memory:")
    conn.execute(f"CREATE TABLE spotify_tracks ({build_staging_ddl(CSV_COLUMNS, COLUMN_TYPES)})")
    placeholders = ", ".join("?" for _ in CSV_COLUMNS)
    conn.executemany(
        f"INSERT INTO spotify_tracks ({', '.join(CSV_COLUMNS)}) VALUES ({placeholders})",
        [_full_row(s) for s in SAMPLE_TRACKS],
    )
    yield conn
    conn.close()


@pytest.fixture
def raw_df():
    """A few rows shaped like the raw Kaggle Spotify_Youtube.csv"""
    return pd.DataFrame({
        "Unnamed: 0": [0, 1, 2, 3],
        "Artist": ["Gorillaz", "Gorillaz", "Gorillaz", None],
        "Url_spotify": ["https://open.spotify.com/artist/3AA28KZvwAUcZuOKwyblJQ"] * 4,
        "Track": ["Feel Good Inc.", "Intro", "Silent Track", "Orphan"],
        "Album": ["Demon Days", "Demon Days", "Demon Days", "Unknown"],
        "Album_type": ["Album", "album", "single", "album"],
        "Uri": ["spotify:track:0d28khcov6AiegSCpG5TuT"] * 4,
        "Danceability": [0.818, 0.3, 0.1, 0.5],
        "Energy": [0.705, 0.4, 0.2, 0.5],
        "Key": [6.0, 1.0, 0.0, 2.0],
        "Loudness": [-6.679, -12.0, -30.0, -8.0],
        "Speechiness": [0.177, 0.05, 0.0, 0.1],
        "Acousticness": [0.00836, 0.5, 0.9, 0.2],
        "Instrumentalness": [0.00233, 0.8, 1.0, 0.0],
        "Liveness": [0.613, 0.0, 0.1, 0.2],
        "Valence": [0.772, 0.2, 0.0, 0.4],
        "Tempo": [138.559, 90.0, 0.0, 100.0],
        "Duration_ms": [222640.0, 63000.0, 0.0, 180000.0],
        "Url_youtube": ["https://www.youtube.com/watch?v=HyHNuVaZJ-k"] * 4,
        "Title": ["Gorillaz - Feel Good Inc. (Official Video)", None, None, None],
        "Channel": ["Gorillaz", None, None, None],
        "Views": [693555221.0, None, 10.0, 5.0],
        "Likes": [6220896.0, None, 1.0, 0.0],
        "Comments": [169907.0, None, 0.0, 0.0],
        "Description": ["Official HD Video", None, None, None],
        "Licensed": ["True", None, "False", "True"],
        "official_video": [True, None, False, True],
        "Stream": [1040234854.0, 2500000.0, 100.0, 7.0],
    })
