import os
import subprocess
from datetime import datetime

from db_utils import get_pg_url

BACKUP_DIR = "backups"


def default_backup_name():
    return f"spotify-tracks-{datetime.now():%Y%m%d-%H%M%S}"


def create_backup(backup_name=None, backup_dir=BACKUP_DIR):
    """pg_dump the database in custom format. Returns pg_dump's exit code."""
    os.makedirs(backup_dir, exist_ok=True)
    backup_file = os.path.join(backup_dir, f"{backup_name or default_backup_name()}.backup")
    print(f"Creating backup → {backup_file}...")
    result = subprocess.run([
        "pg_dump",
        "--dbname", get_pg_url(),
        "-F", "c",  # custom format for pg_restore
        "-f", backup_file,
    ])
    if result.returncode == 0:
        print("✅ Backup complete.")
    else:
        print(f"⚠️ Backup failed with exit code {result.returncode}")
    return result.returncode


if __name__ == "__main__":
    create_backup("post-load")
