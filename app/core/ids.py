# app/core/ids.py
import threading
import time

_lock = threading.Lock()
_last_ms = 0


def _next_millis() -> int:
    """
    Current time in milliseconds, bumped so that no value is ever
    returned twice and values never go backwards within a process.
    """
    global _last_ms
    with _lock:
        now = time.time_ns() // 1_000_000
        _last_ms = max(now, _last_ms + 1)
        return _last_ms


def new_product_id() -> str:
    return f"p{_next_millis()}"


def new_vendor_id() -> str:
    return f"v{_next_millis()}"


def new_order_id() -> str:
    return f"ord_{_next_millis()}"
