"""
Corrected review-target helpers.

Features:
- Input validation on arithmetic helpers
- No hardcoded credentials (API key read from the environment)
- Network fetch with timeouts, status checks and visible failures
- Single-pass search with early exit
- Type hints and docstrings
"""

from __future__ import annotations
import asyncio
import logging
import os
from typing import Any, Dict, Mapping, Optional, Sequence

import requests

logger = logging.getLogger(__name__)

API_KEY_ENV = "REVIEW_API_KEY"
DEFAULT_TIMEOUT = 10.0
NOT_FOUND = -1


class FetchError(RuntimeError):
    """Raised when a remote resource cannot be fetched or decoded."""


def calculate_sum(a: float, b: float) -> float:
    """
    Add two real numbers.

    Raises TypeError for anything that is not an int or float (bools included).
    """
    for name, value in (("a", a), ("b", b)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    return a + b


def _auth_headers() -> Dict[str, str]:
    key = os.getenv(API_KEY_ENV)
    if not key:
        return {}
    return {"Authorization": f"Bearer {key}"}


def _get_json(url: str, timeout: float) -> Any:
    try:
        r = requests.get(url, headers=_auth_headers(), timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"request to {url} failed") from exc
    try:
        return r.json()
    except ValueError as exc:
        # requests' JSONDecodeError is a ValueError as well
        raise FetchError(f"invalid JSON from {url}") from exc


async def fetch_data(url: str, timeout: float = DEFAULT_TIMEOUT) -> Any:
    """
    Fetch ``url`` and return the parsed JSON body.

    The blocking request runs in a worker thread so the event loop stays free.
    Raises FetchError on transport, HTTP or decoding failures.
    """
    if not url:
        raise ValueError("url must not be empty")
    return await asyncio.to_thread(_get_json, url, timeout)


def find_item(items: Sequence[Any], target: Any) -> int:
    """Return the index of the first element equal to ``target``, or NOT_FOUND."""
    for i, item in enumerate(items):
        if item == target:
            return i
    return NOT_FOUND


def process_user_data(user: Mapping[str, Any]) -> Dict[str, Optional[Any]]:
    """
    Normalize a user record into ``{"id", "name", "email"}``.

    The email is lower-cased; a missing or empty email raises ValueError
    and a non-string email raises TypeError.
    """
    email = user.get("email")
    if not email:
        raise ValueError("Email required")
    if not isinstance(email, str):
        raise TypeError(f"email must be a string, got {type(email).__name__}")
    return {
        "id": user.get("id"),
        "name": user.get("name"),
        "email": email.lower(),
    }


def main():
    """Main entry point."""
    logger.info("Sum: %s", calculate_sum(2, 3))
    logger.info("Index of 1: %d", find_item([3, 1, 4, 1, 5], 1))
    user = process_user_data({"id": 1, "name": "Alice", "email": "Alice@Example.com"})
    logger.info("Normalized user: %s", user)

    try:
        data = asyncio.run(fetch_data("https://example.com/data.json"))
        logger.info("Fetched %s", type(data).__name__)
    except FetchError as exc:
        logger.exception("Failed to fetch data: %s", exc)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
