"""Shape detection for LottieFiles payloads.

Search responses arrive wrapped in an envelope
(``{"data": {"results": {"data": [...]}}}``); popular/featured sources come
back either as a bare list or in one of a few wrappers. Anything unexpected
normalizes to an empty list rather than failing the request.
"""

from typing import Any


def _dig(payload: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(payload, dict):
            return None
        payload = payload.get(key)
    return payload


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def extract_search_results(payload: Any) -> list:
    return _as_list(_dig(payload, "data", "results", "data"))


def extract_popular_results(payload: Any) -> list:
    if isinstance(payload, list):
        return payload
    for path in (("data", "results", "data"), ("data",), ("animations",)):
        found = _dig(payload, *path)
        if isinstance(found, list):
            return found
    return []


def normalize(payload: Any, is_search: bool) -> dict:
    """Wrap upstream results as ``{"animations": [...]}``."""
    animations = extract_search_results(payload) if is_search else extract_popular_results(payload)
    return {"animations": animations}
