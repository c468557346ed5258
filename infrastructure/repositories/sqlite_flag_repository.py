import sqlite3

from use_cases.session_models import SessionFlags

LOGGED_IN_KEY = "isLoggedIn"
ONBOARDING_KEY = "hasCompletedOnboarding"


class SQLiteFlagRepository:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _conn(self):
        return sqlite3.connect(self.db_path)

    def _get_current_version(self, conn) -> int:
        row = conn.execute("SELECT version FROM schema_info").fetchone()
        if row:
            return row[0]
        return 0

    def _migrate_v1(self, conn):
        """Baseline schema (v1)."""
        conn.execute("""
            CREATE TABLE IF NOT EXISTS app_flags (
                key TEXT PRIMARY KEY,
                value INTEGER NOT NULL DEFAULT 0
            )
        """)

    def init_flags_db(self):
        MIGRATIONS = [self._migrate_v1]

        with self._conn() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS schema_info (
                    version INTEGER NOT NULL
                )
            """)

            current_version = self._get_current_version(conn)
            has_version_row = conn.execute("SELECT COUNT(*) FROM schema_info").fetchone()[0] > 0
            if not has_version_row:
                conn.execute("INSERT INTO schema_info (version) VALUES (?)", (current_version,))

            for i in range(current_version, len(MIGRATIONS)):
                target_version = i + 1
                try:
                    MIGRATIONS[i](conn)
                    conn.execute("UPDATE schema_info SET version = ?", (target_version,))
                except Exception as e:
                    # Leaving the with-block by exception rolls the whole init back.
                    raise RuntimeError(f"Flags database migration to v{target_version} failed: {e}") from e

            conn.commit()

    def get_flag(self, key: str, default: bool = False) -> bool:
        with self._conn() as conn:
            row = conn.execute("SELECT value FROM app_flags WHERE key = ?", (key,)).fetchone()
            if row is None:
                return default
            return bool(row[0])

    def load_flags(self) -> SessionFlags:
        return SessionFlags(
            is_logged_in=self.get_flag(LOGGED_IN_KEY),
            has_completed_onboarding=self.get_flag(ONBOARDING_KEY),
        )

    def save_flags(self, flags: SessionFlags):
        with self._conn() as conn:
            conn.executemany("""
                INSERT INTO app_flags (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
            """, [
                (LOGGED_IN_KEY, int(flags.is_logged_in)),
                (ONBOARDING_KEY, int(flags.has_completed_onboarding)),
            ])
            conn.commit()

    def reset_flags(self):
        with self._conn() as conn:
            conn.execute("DELETE FROM app_flags")
            conn.commit()
