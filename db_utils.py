import os
import sys
import psycopg
from dotenv import load_dotenv

load_dotenv()                       # reads PG_URL or DATABASE_URL


def get_pg_url() -> str:
    """Get the PostgreSQL URL from the environment"""
    pg_url = os.getenv("PG_URL") or os.getenv("DATABASE_URL")
    if not pg_url:
        sys.exit("Set PG_URL or DATABASE_URL in your .env")
    return pg_url


def get_sqlalchemy_url() -> str:
    """Same URL, pointed at the psycopg 3 driver for SQLAlchemy"""
    url = get_pg_url()
    for prefix in ("postgresql+psycopg://", "postgresql://", "postgres://"):
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix):]
    return url


def get_db_connection(autocommit: bool = False) -> psycopg.Connection:
    """Get database connection using environment variables"""
    return psycopg.connect(get_pg_url(), autocommit=autocommit)
