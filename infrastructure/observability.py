"""
Centralized Observability Infrastructure.
Structured logging setup and optional Sentry SDK initialization,
governed entirely by environment variables.
"""

import os
import logging
import re
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

# Patterns to scrub from Sentry events
SENSITIVE_PATTERNS = [
    re.compile(r"([a-zA-Z0-9_\-\.]{30,})"),  # ID tokens, API keys, DSNs
    re.compile(r"[\w\.\+\-]+@[\w\-]+\.[\w\.\-]+"),  # email addresses
]


def _mask_string(val: str) -> str:
    for pattern in SENSITIVE_PATTERNS:
        val = pattern.sub("[REDACTED]", val)
    return val


def _recursive_scrub(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _recursive_scrub(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_recursive_scrub(i) for i in obj]
    elif isinstance(obj, str):
        return _mask_string(obj)
    return obj


def _scrub_sensitive_data(event: Dict[str, Any], hint: Dict[str, Any]) -> Dict[str, Any]:
    """
    Sentry before_send hook. Scrubs tokens and emails from stacktrace
    locals and log messages before they leave the process.
    """
    if "exception" in event and "values" in event["exception"]:
        for exc in event["exception"]["values"]:
            if "stacktrace" in exc and "frames" in exc["stacktrace"]:
                for frame in exc["stacktrace"]["frames"]:
                    if "vars" in frame:
                        frame["vars"] = _recursive_scrub(frame["vars"])

    if "logentry" in event:
        event["logentry"] = _recursive_scrub(event["logentry"])

    return event


def setup_observability() -> None:
    """
    Initializes global logging and Sentry (if DSN is present).
    Call once at application startup.
    """
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    sentry_dsn = os.getenv("SENTRY_DSN")
    if sentry_dsn:
        import sentry_sdk
        sentry_env = os.getenv("SENTRY_ENV", "development")

        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=sentry_env,
            traces_sample_rate=1.0,
            send_default_pii=False,
            before_send=_scrub_sensitive_data
        )
        log.info(f"Sentry SDK initialized (env: {sentry_env})")
    else:
        log.info("SENTRY_DSN not provided. Running without Sentry.")

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)


def set_sentry_user(user_id: Optional[str]) -> None:
    """Attach the signed-in user id to Sentry events, if Sentry is active."""
    import sentry_sdk

    if sentry_sdk.get_client().is_active():
        sentry_sdk.set_user({"id": user_id} if user_id else None)
