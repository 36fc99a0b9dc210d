import enum
from sqlalchemy import Column, String, Integer, Float, BigInteger, Boolean, DateTime, create_engine
from sqlalchemy.orm import declarative_base

from db_utils import get_sqlalchemy_url

Base = declarative_base()

class AlbumType(str, enum.Enum):
    album = "album"; single = "single"; compilation = "compilation"
    other = "other"

class MostPlayedOn(str, enum.Enum):
    spotify = "Spotify"; youtube = "Youtube"

# One flat row per track/video pair. Artist and album repeat on every row.
class SpotifyTrack(Base):
    __tablename__ = "spotify_tracks"
    id               = Column(Integer, primary_key=True)
    artist           = Column(String)
    track            = Column(String)
    album            = Column(String)
    album_type       = Column(String)         # AlbumType values, not enforced
    danceability     = Column(Float)
    energy           = Column(Float)
    loudness         = Column(Float)
    speechiness      = Column(Float)
    acousticness     = Column(Float)
    instrumentalness = Column(Float)
    liveness         = Column(Float)
    valence          = Column(Float)
    tempo            = Column(Float)
    duration_min     = Column(Float)
    title            = Column(String)         # youtube video title
    channel          = Column(String)
    views            = Column(BigInteger)
    likes            = Column(BigInteger)
    comments         = Column(BigInteger)
    licensed         = Column(Boolean)
    official_video   = Column(Boolean)
    stream           = Column(BigInteger)
    energy_liveness  = Column(Float)
    most_played_on   = Column(String)         # MostPlayedOn values
    source_name      = Column(String)         # feed that loaded the row
    ingested_at      = Column(DateTime(timezone=True))

def init_db(url=None):
    eng = create_engine(url or get_sqlalchemy_url(), future=True)
    Base.metadata.create_all(eng)
    print(f"[INFO] Table {SpotifyTrack.__tablename__} ready")
    return eng
