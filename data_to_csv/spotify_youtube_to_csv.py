import os
import re
import argparse
import pandas as pd
from tqdm import tqdm

from loaders.spotify_youtube_loader import (
    RAW_CSV_PATH, CSV_PATH, CSV_COLUMNS, FLOAT_COLUMNS, COUNTER_COLUMNS, FLAG_COLUMNS,
)
from models import AlbumType, MostPlayedOn

# Names used by the cleaned copies of the dataset that circulate on Kaggle
RENAMES = {
    "streams": "stream",
    "energyliveness": "energy_liveness",
    "most_playedon": "most_played_on",
}

ALBUM_TYPES = [t.value for t in AlbumType]

TRUE_VALUES ={"true", "t", "yes", "1", "1.0"}
FALSE_VALUES = {"false", "f", "no", "0", "0.0"}


def norm_colname(c: str) -> str:
    c = str(c).strip().lower()
    c = re.sub(r"[^a-z0-9]+", "_", c)
    return re.sub(r"_+", "_", c).strip("_")


def parse_flag(val):
    """Parse a True/False cell, NA when unreadable"""
    if pd.isna(val):
        return pd.NA
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in TRUE_VALUES:
        return True
    if s in FALSE_VALUES:
        return False
    return pd.NA


def clean_chunk(df: pd.DataFrame) -> pd.DataFrame:
    """Bring one chunk of the raw dataset to the spotify_tracks layout"""
    df = df.rename(columns=norm_colname).rename(columns=RENAMES)

    for col in FLOAT_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    for col in COUNTER_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce").round().astype("Int64")
    for col in FLAG_COLUMNS:
        if col in df.columns:
            df[col] = df[col].map(parse_flag).astype("boolean")

    if "duration_min" not in df.columns and "duration_ms" in df.columns:
        df["duration_min"] = pd.to_numeric(df["duration_ms"], errors="coerce") / 60000

    if "energy_liveness" not in df.columns and {"energy", "liveness"} <= set(df.columns):
        df["energy_liveness"] = df["energy"] / df["liveness"].where(df["liveness"] != 0)

    if "most_played_on" not in df.columns and {"stream", "views"} <= set(df.columns):
        spotify_wins = (df["stream"].fillna(0) > df["views"].fillna(0)).astype(bool)
        df["most_played_on"] = spotify_wins.map({
            True: MostPlayedOn.spotify.value,
            False: MostPlayedOn.youtube.value,
        })

    if "album_type" in df.columns:
        album_type = df["album_type"].astype("string").str.strip().str.lower()
        known = album_type.isin(ALBUM_TYPES) | album_type.isna()
        df["album_type"] = album_type.where(known, AlbumType.other.value)

    df = df.dropna(subset=[c for c in ("artist", "track") if c in df.columns])
    if "duration_min" in df.columns:
        df = df[df["duration_min"] != 0]

    return df.reindex(columns=CSV_COLUMNS)


def process_spotify_youtube(input_file=RAW_CSV_PATH, output_file=CSV_PATH, chunksize=50_000):
    """Read the raw Spotify & YouTube CSV, clean it, save to csvs/spotify_youtube/spotify_tracks.csv"""
    out_dir = os.path.dirname(output_file)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    print(f"Reading {input_file}...")
    rows_in = rows_out = 0
    first = True
    reader = pd.read_csv(input_file, chunksize=chunksize, low_memory=False)
    for chunk in tqdm(reader, desc="Cleaning chunks", unit="chunk"):
        rows_in += len(chunk)
        clean = clean_chunk(chunk)
        rows_out += len(clean)
        clean.to_csv(output_file, mode="w" if first else "a", header=first, index=False)
        first = False

    if first:
        # empty input still gets a header
        pd.DataFrame(columns=CSV_COLUMNS).to_csv(output_file, index=False)

    print(f"Tracks file saved to {output_file}")
    print(f"Total rows read: {rows_in:,}")
    print(f"Total rows kept: {rows_out:,} (dropped {rows_in - rows_out:,})")
    return rows_out


def main(argv=None):
    parser = argparse.ArgumentParser(description="Clean the Spotify & YouTube dataset for loading")
    parser.add_argument("--input", default=RAW_CSV_PATH)
    parser.add_argument("--output", default=CSV_PATH)
    parser.add_argument("--chunksize", type=int, default=50_000)
    args = parser.parse_args(argv)
    process_spotify_youtube(args.input, args.output, args.chunksize)


if __name__ == "__main__":
    main()
