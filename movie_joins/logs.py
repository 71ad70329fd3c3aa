import json, time, uuid, datetime as dt
import logging
from collections import deque
from typing import Optional, List, Dict, Any

logger = logging.getLogger(__name__)

# Store is read-only, so query records go to the logger plus a small
# in-process buffer instead of an operation_log table.
_MAX_ENTRIES = 500
_entries: deque = deque(maxlen=_MAX_ENTRIES)


class QueryLogContext:
    def __init__(self, action: str, user: str = "owner"):
        self.action = action
        self.user = user
        self.request_id = str(uuid.uuid4())
        self.start = time.perf_counter()
        self.payload = None
        self.row_count = None

    def set_payload(self, obj): self.payload = obj
    def set_row_count(self, n: int): self.row_count = n

    def write(self, result: str = "OK", err: Optional[str] = None) -> Dict[str, Any]:
        elapsed_ms = int((time.perf_counter() - self.start) * 1000)
        rec = {
            "ts": dt.datetime.now(dt.timezone.utc).isoformat(),
            "user": self.user,
            "action": self.action,
            "request_id": self.request_id,
            "payload_json": json.dumps(self.payload, ensure_ascii=False, default=str) if self.payload is not None else None,
            "row_count": self.row_count,
            "result": result,
            "err_msg": err,
            "latency_ms": elapsed_ms,
        }
        _entries.append(rec)
        if result == "OK":
            logger.info("%s ok rows=%s latency_ms=%s request_id=%s",
                        self.action, self.row_count, elapsed_ms, self.request_id)
        else:
            logger.warning("%s %s err=%s latency_ms=%s request_id=%s",
                           self.action, result, err, elapsed_ms, self.request_id)
        return rec


def recent_entries(limit: int = 50) -> List[Dict[str, Any]]:
    """Most recent query records, newest first."""
    if limit <= 0:
        return []
    return list(reversed(_entries))[:limit]


def search_logs(action: str | None = None, result: str | None = None) -> List[Dict[str, Any]]:
    out = []
    for rec in reversed(_entries):
        if action and rec["action"] != action:
            continue
        if result and rec["result"] != result:
            continue
        out.append(rec)
    return out


def clear_entries():
    _entries.clear()
