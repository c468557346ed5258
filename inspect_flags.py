import os
import sys

import toml

from infrastructure.repositories.sqlite_flag_repository import SQLiteFlagRepository


def get_flags_db():
    try:
        config = toml.load(".streamlit/secrets.toml")
        return config.get("FLAGS_DB") or os.getenv("FLAGS_DB") or "session_flags.db"
    except Exception as e:
        print(f"Error reading secrets: {e}")
        return os.getenv("FLAGS_DB") or "session_flags.db"


def main(argv):
    db_path = get_flags_db()
    if not os.path.exists(db_path):
        print(f"No flags database at {db_path} (fresh install: logged out, onboarding pending)")
        return 0

    repo = SQLiteFlagRepository(db_path)
    repo.init_flags_db()

    if "--reset" in argv:
        repo.reset_flags()
        print(f"🧹 Flags in {db_path} reset to defaults")
        print("⚠️ A running app keeps its flags in memory and writes them back on the next action. Restart it to pick up the reset.")

    flags = repo.load_flags()
    print(f"📄 {db_path}")
    print(f"  isLoggedIn:             {flags.is_logged_in}")
    print(f"  hasCompletedOnboarding: {flags.has_completed_onboarding}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
