"""Shared text and time formatting helpers for human-facing views."""

from __future__ import annotations

import time

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB", "PB"]


def human_duration(seconds: float) -> str:
    """Coarse duration, e.g. "45 seconds", "3 minutes", "2 days"."""
    sec = max(0, int(seconds))
    for unit, span in (("day", 86400), ("hour", 3600), ("minute", 60)):
        if sec >= span:
            count = sec // span
            return f"{count} {unit}{'s' if count != 1 else ''}"
    return f"{sec} second{'s' if sec != 1 else ''}"


def age_since(timestamp: int | float, now: float | None = None) -> str:
    """Age of a Unix timestamp, e.g. "3 hours ago"."""
    if not timestamp:
        return "n/a"
    now = time.time() if now is None else now
    return f"{human_duration(now - timestamp)} ago"


def human_size(size: int | None) -> str:
    """Decimal byte size, e.g. "1.2 GB"."""
    if size is None:
        return "n/a"
    value = float(size)
    for unit in SIZE_UNITS:
        if value < 1000 or unit == SIZE_UNITS[-1]:
            if unit == "B":
                return f"{int(value)} B"
            return f"{value:.1f} {unit}"
        value /= 1000
    return f"{size} B"
