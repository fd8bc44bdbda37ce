"""PostgreSQL schema and operations for the Unicode name shard.

The shard stores one row per named code point, mirroring the JSON name
table, so deployments that already run PostgreSQL can load names from
there instead of the packaged asset.
"""

import os
import subprocess

import psycopg

DB_CONFIG = {
    "dbname": os.environ.get("UTF8PLAY_DB_NAME", "utf8play"),
    "user": os.environ.get("UTF8PLAY_DB_USER", "utf8play"),
    "password": os.environ.get("UTF8PLAY_DB_PASSWORD", "utf8play_dev"),
    "host": os.environ.get("UTF8PLAY_DB_HOST", "localhost"),
    "port": int(os.environ.get("UTF8PLAY_DB_PORT", "5432")),
}


def connect():
    """Get a connection to the name shard database."""
    return psycopg.connect(**DB_CONFIG)


def init_schema(conn):
    """Create the name table if it doesn't exist."""
    with conn.cursor() as cur:
        cur.execute("""
            CREATE TABLE IF NOT EXISTS unicode_names (
                code    TEXT PRIMARY KEY,
                name    TEXT NOT NULL,
                value   INTEGER NOT NULL
            );

            CREATE INDEX IF NOT EXISTS idx_unicode_names_value
                ON unicode_names(value);
        """)
    conn.commit()


def insert_name(cur, code: str, name: str):
    """Insert a name entry, updating on conflict."""
    cur.execute("""
        INSERT INTO unicode_names (code, name, value)
        VALUES (%s, %s, %s)
        ON CONFLICT (code) DO UPDATE SET
            name = EXCLUDED.name,
            value = EXCLUDED.value
    """, (code, name, int(code, 16)))


def load_names(conn):
    """Retrieve all (code, name) rows in code point order."""
    with conn.cursor() as cur:
        cur.execute("SELECT code, name FROM unicode_names ORDER BY value")
        return cur.fetchall()


def dump_sql(output_path):
    """Export the database as a SQL dump file."""
    result = subprocess.run(
        ["pg_dump", "--clean", "--if-exists", "--no-owner",
         "-d", DB_CONFIG["dbname"],
         "-U", DB_CONFIG["user"],
         "-h", DB_CONFIG["host"],
         "-p", str(DB_CONFIG["port"]),
         "-f", str(output_path)],
        env={**os.environ, "PGPASSWORD": DB_CONFIG["password"]},
        capture_output=True, text=True
    )
    if result.returncode != 0:
        raise RuntimeError(f"pg_dump failed: {result.stderr}")
