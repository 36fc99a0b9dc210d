import pandas as pd
import pytest

from data_to_csv.spotify_youtube_to_csv import clean_chunk, norm_colname, parse_flag, process_spotify_youtube
from loaders.spotify_youtube_loader import CSV_COLUMNS


@pytest.mark.parametrize("raw, expected", [
    ("Artist", "artist"),
    ("Unnamed: 0", "unnamed_0"),
    (" Duration_ms ", "duration_ms"),
    ("most_playedon", "most_playedon"),
    ("EnergyLiveness", "energyliveness"),
])
def test_norm_colname(raw, expected):
    assert norm_colname(raw) == expected


def test_parse_flag():
    assert parse_flag("True") is True
    assert parse_flag("false") is False
    assert parse_flag(1) is True
    assert parse_flag(False) is False
    assert parse_flag(None) is pd.NA
    assert parse_flag("maybe") is pd.NA


def test_clean_chunk_layout(raw_df):
    clean = clean_chunk(raw_df)
    assert list(clean.columns) == CSV_COLUMNS
    # zero-length track and the row without an artist are gone
    assert list(clean["track"]) == ["Feel Good Inc.", "Intro"]


def test_clean_chunk_derived_columns(raw_df):
    clean = clean_chunk(raw_df).set_index("track")
    feel_good = clean.loc["Feel Good Inc."]
    assert feel_good["duration_min"] == pytest.approx(222640 / 60000)
    assert feel_good["energy_liveness"] == pytest.approx(0.705 / 0.613)
    assert feel_good["most_played_on"] == "Spotify"
    assert feel_good["album_type"] == "album"
    assert feel_good["views"] == 693555221
    assert bool(feel_good["licensed"]) is True

    intro = clean.loc["Intro"]
    assert pd.isna(intro["energy_liveness"])     # liveness is 0
    assert pd.isna(intro["views"])
    assert intro["most_played_on"] == "Spotify"  # missing views count as 0


def test_clean_chunk_types(raw_df):
    clean = clean_chunk(raw_df)
    assert str(clean["views"].dtype) == "Int64"
    assert str(clean["stream"].dtype) == "Int64"
    assert str(clean["licensed"].dtype) == "boolean"


def test_clean_chunk_keeps_already_cleaned_columns():
    df = pd.DataFrame({
        "Artist": ["Gorillaz"], "Track": ["Feel Good Inc."], "Duration_min": [3.71],
        "Energy": [0.7], "Liveness": [0.5], "EnergyLiveness": [1.4],
        "Views": [10], "Stream": [5], "most_playedon": ["Youtube"],
    })
    clean = clean_chunk(df)
    assert clean["duration_min"].iloc[0] == pytest.approx(3.71)
    assert clean["energy_liveness"].iloc[0] == pytest.approx(1.4)
    assert clean["most_played_on"].iloc[0] == "Youtube"
    assert clean["title"].isna().all()


def test_process_spotify_youtube(tmp_path, raw_df, capsys):
    raw = tmp_path / "Spotify_Youtube.csv"
    out = tmp_path / "out" / "spotify_tracks.csv"
    raw_df.to_csv(raw, index=False)

    kept = process_spotify_youtube(str(raw), str(out), chunksize=2)

    assert kept == 2
    written = pd.read_csv(out)
    assert list(written.columns) == CSV_COLUMNS
    assert list(written["track"]) == ["Feel Good Inc.", "Intro"]
    assert "dropped 2" in capsys.readouterr().out


def test_clean_chunk_maps_unknown_album_types_to_other():
    df = pd.DataFrame({
        "Artist": ["a", "b", "c", "d"],
        "Track": ["w", "x", "y", "z"],
        "Album_type": [" Single", "COMPILATION", "ep", None],
    })
    clean = clean_chunk(df)
    assert list(clean["album_type"].iloc[:3]) == ["single", "compilation", "other"]
    assert pd.isna(clean["album_type"].iloc[3])
