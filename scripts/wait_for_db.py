"""Block until the configured Postgres accepts connections (container entrypoint helper)."""
import os
import time

import dj_database_url
import psycopg


def env(name, default=None):
    value = os.getenv(name, default)
    if value is None:
        raise RuntimeError(f"Missing required env var: {name}")
    return value


def build_dsn():
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        config = dj_database_url.parse(database_url)
        return (
            f"dbname={config['NAME']} user={config['USER']} password={config['PASSWORD']} "
            f"host={config['HOST']} port={config['PORT'] or 5432}"
        )
    return (
        f"dbname={env('POSTGRES_DB', 'roster')} user={env('POSTGRES_USER', 'roster')} "
        f"password={env('POSTGRES_PASSWORD', 'roster')} host={env('POSTGRES_HOST', 'db')} "
        f"port={env('POSTGRES_PORT', '5432')}"
    )


def main():
    retries = int(os.getenv("DB_CONNECT_RETRIES", "30"))
    delay = float(os.getenv("DB_CONNECT_DELAY", "1"))
    dsn = build_dsn()

    for attempt in range(1, retries + 1):
        try:
            with psycopg.connect(dsn, connect_timeout=5) as conn:
                conn.execute("SELECT 1")
            print(f"database ready after {attempt} attempt(s)")
            return 0
        except psycopg.OperationalError as exc:
            if attempt == retries:
                print(f"database not reachable: {exc}")
                break
            time.sleep(delay)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
