from __future__ import annotations

import secrets
import time

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(n: int) -> str:
    out = []
    while n:
        n, rem = divmod(n, 36)
        out.append(_ALPHABET[rem])
    return "".join(reversed(out)) or "0"


def generate_id() -> str:
    """Millisecond clock in base 36 followed by random base-36 characters."""
    stamp = _to_base36(int(time.time() * 1000))
    return stamp + "".join(secrets.choice(_ALPHABET) for _ in range(10))
