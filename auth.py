import os
from typing import Optional

import streamlit as st

from infrastructure.documents.firestore_profile_store import FirestoreProfileStore
from infrastructure.identity.firebase_identity_gateway import FirebaseIdentityGateway
from infrastructure.repositories.sqlite_flag_repository import SQLiteFlagRepository
from use_cases.session_controller import SessionController


class ConfigurationError(Exception):
    pass


FLAGS_DB = "session_flags.db"


def get_secret(key):
    try:
        return st.secrets.get(key)
    except FileNotFoundError:
        return None


def get_setting(key: str, default: Optional[str] = None) -> Optional[str]:
    return get_secret(key) or os.getenv(key) or default


def require_setting(key: str) -> str:
    value = get_setting(key)
    if not value:
        raise ConfigurationError(f"`{key}` is not set in secrets.toml or the environment.")
    return value


_flag_repo = None
_identity_gateway = None
_profile_store = None
_session_controller = None


def get_flag_repo() -> SQLiteFlagRepository:
    global _flag_repo
    db_path = get_setting("FLAGS_DB", FLAGS_DB)
    if _flag_repo is None or _flag_repo.db_path != db_path:
        _flag_repo = SQLiteFlagRepository(db_path)
    return _flag_repo


def init_flags_db():
    get_flag_repo().init_flags_db()


def get_identity_gateway() -> FirebaseIdentityGateway:
    global _identity_gateway
    if _identity_gateway is None:
        _identity_gateway = FirebaseIdentityGateway(require_setting("FIREBASE_API_KEY"))
    return _identity_gateway


def get_profile_store() -> FirestoreProfileStore:
    global _profile_store
    if _profile_store is None:
        _profile_store = FirestoreProfileStore(
            require_setting("FIREBASE_PROJECT_ID"),
            token_provider=get_identity_gateway().current_id_token,
        )
    return _profile_store


def get_session_controller() -> SessionController:
    """Process-wide controller: the flags are scoped to the installation, not the browser tab."""
    global _session_controller
    if _session_controller is None:
        _session_controller = SessionController(
            identity=get_identity_gateway(),
            profiles=get_profile_store(),
            flag_store=get_flag_repo(),
        )
    return _session_controller


def reset_singletons():
    global _flag_repo, _identity_gateway, _profile_store, _session_controller
    _flag_repo = None
    _identity_gateway = None
    _profile_store = None
    _session_controller = None
