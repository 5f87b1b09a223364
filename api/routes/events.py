"""Change-event polling route."""

from fastapi import APIRouter

from ..state import get_session

router = APIRouter()


@router.get("")
async def drain_events():
    """Return and clear change events published since the last call."""
    events = get_session().bus.drain()
    return {
        "events": [event.to_dict() for event in events],
        "needs_resync": any(event.needs_resync for event in events),
    }
