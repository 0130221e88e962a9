"""Random per-browser player identity shown on leaderboards."""
import logging
import secrets
import string
import time

from brainmark.client.storage import StorageUnavailable

logger = logging.getLogger(__name__)

ANONYMOUS_ID_KEY = "hb_anonymous_id"

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_anonymous_id() -> str:
    """Return a new id of the form ``anon_<base36 ms timestamp>_<13 random base36 chars>``."""
    timestamp = _to_base36(int(time.time() * 1000))
    random_part = "".join(secrets.choice(_BASE36) for _ in range(13))
    return f"anon_{timestamp}_{random_part}"


def get_anonymous_id(store) -> str:
    """
    Return the stored anonymous id, creating and persisting one if needed.

    If the store is unavailable a fresh id is returned for this session only.
    """
    try:
        existing = store.get(ANONYMOUS_ID_KEY)
    except StorageUnavailable:
        logger.warning("Storage unavailable; using a session-only anonymous id")
        return generate_anonymous_id()
    if existing:
        return existing

    anonymous_id = generate_anonymous_id()
    try:
        store.set(ANONYMOUS_ID_KEY, anonymous_id)
    except StorageUnavailable:
        logger.warning("Could not persist anonymous id")
    return anonymous_id
