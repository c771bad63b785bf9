import uuid
from datetime import datetime, timezone

def new_id() -> str:
    return uuid.uuid4().hex


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()

"""
ID and timestamp utilities & it provides:
- Unique plan IDs for the fallback store
- ISO-8601 creation timestamps

The main purpose:
Consistent identifier creation across system.
"""
