"""In-process design session shared by the API routes."""

import logging
from typing import Optional

from room3d import DesignSession, Room3DConfig

logger = logging.getLogger(__name__)

# One session per process (replace with per-user sessions behind login)
_session: Optional[DesignSession] = None


def get_session() -> DesignSession:
    """Return the active session, creating it on first use."""
    global _session
    if _session is None:
        _session = DesignSession(Room3DConfig.from_env())
    return _session


def reset_session() -> DesignSession:
    """Discard the current session and start a fresh one."""
    global _session
    if _session is not None:
        _session.close()
    logger.info("Resetting design session")
    _session = DesignSession(Room3DConfig.from_env())
    return _session
