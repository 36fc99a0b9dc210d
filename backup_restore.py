import sys
import subprocess

from db_utils import get_pg_url

# --clean --if-exists drops spotify_tracks before recreating it,
# so a restore over a loaded database is safe.


def restore_backup(backup_file):
    """pg_restore a custom-format dump. Returns pg_restore's exit code."""
    print(f"Restoring from {backup_file}...")
    result = subprocess.run([
        "pg_restore",
        "--clean",
        "--if-exists",
        "--no-owner",
        "--dbname", get_pg_url(),
        backup_file,
    ])
    if result.returncode == 0:
        print("✅ Restore complete.")
    else:
        print(f"⚠️ Restore failed with exit code {result.returncode}")
    return result.returncode


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("Usage: python backup_restore.py backups/<name>.backup")
    sys.exit(restore_backup(sys.argv[1]))
