import json
import uuid
from datetime import datetime, timezone
from typing import Any


def build_event(event_type: str, data: dict[str, Any], source: str) -> dict[str, Any]:
    """
    Wrap a payload in the platform event envelope.

    event_type is also the routing key on the domain_events exchange,
    e.g. "employee.created".
    """
    return {
        "event_id": str(uuid.uuid4()),
        "event_type": event_type,
        "source": source,
        "occurred_at": datetime.now(timezone.utc).isoformat(),
        "data": data,
    }


def to_json(event: dict[str, Any]) -> str:
    # names like "Martínez" stay readable on the wire
    return json.dumps(event, separators=(",", ":"), ensure_ascii=False)
