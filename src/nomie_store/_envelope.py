"""Response envelope decoding."""

from __future__ import annotations

from typing import Any


def unwrap_envelope(body: Any) -> Any:
    """Strip the optional ``{"data": [...]}`` wrapper from a response body.

    The server returns collections either bare (``[...]``) or wrapped
    (``{"data": [...]}``). A dict is unwrapped only when its ``data`` value
    is a list. A missing or falsy scalar body (``None``, ``False``, ``0``,
    ``""``) becomes an empty list; every other body, including an empty
    dict, is returned unchanged.

    >>> unwrap_envelope({"data": [1, 2, 3]})
    [1, 2, 3]
    >>> unwrap_envelope([1, 2, 3])
    [1, 2, 3]
    >>> unwrap_envelope(None)
    []
    >>> unwrap_envelope({})
    {}
    """
    if isinstance(body, dict) and isinstance(body.get("data"), list):
        return body["data"]
    if not body and not isinstance(body, (dict, list)):
        return []
    return body
