import random
import time

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, 36)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def generate_id() -> str:
    """Random part followed by the current time in ms, both base36."""
    return _base36(random.getrandbits(52)) + _base36(time.time_ns() // 1_000_000)
