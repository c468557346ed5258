"""Startup orchestration for application bootstrap."""

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

import logging

import auth
from utils import session_manager

log = logging.getLogger(__name__)

StartupStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class StartupResult:
    """Result contract for startup/bootstrap orchestration."""

    status: StartupStatus
    planned_steps: Tuple[str, ...]
    reason: Optional[str] = None


def run_startup() -> StartupResult:
    """Prepare flag storage, the session controller and per-tab navigation state."""
    executed_steps = []

    auth.init_flags_db()
    executed_steps.append("init_flags_db")

    try:
        controller = auth.get_session_controller()
    except auth.ConfigurationError as e:
        log.error(f"Startup halted: {e}")
        return StartupResult(status="STOP", planned_steps=tuple(executed_steps), reason=str(e))
    executed_steps.append("build_session_controller")

    session_manager.init_session_state()
    executed_steps.append("init_session_state")

    session_manager.track_screen(controller.current_screen())
    executed_steps.append("track_screen")

    return StartupResult(status="CONTINUE", planned_steps=tuple(executed_steps))
