"""Safe navigation over loosely shaped JSON values."""

from typing import Any


def dig(data: Any, *path: str | int, default: Any = None) -> Any:
    """Follow ``path`` through nested dicts and lists.

    String steps index dicts, integer steps index lists. Any missing key,
    out-of-range index or wrong container type yields ``default``; the
    function never raises.
    """
    current = data
    for step in path:
        if isinstance(step, int) and not isinstance(step, bool):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return default
            current = current[step]
        elif isinstance(current, dict):
            if step not in current:
                return default
            current = current[step]
        else:
            return default
    if current is None:
        return default
    return current


def dig_str(data: Any, *path: str | int) -> str:
    """Like dig, but returns "" unless the value is a string."""
    value = dig(data, *path)
    if isinstance(value, str):
        return value
    return ""


def dig_list(data: Any, *path: str | int) -> list[Any]:
    """Like dig, but returns a list ([] when absent or not a list)."""
    value = dig(data, *path)
    if isinstance(value, list):
        return value
    return []
