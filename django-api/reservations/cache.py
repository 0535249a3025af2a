"""Cache keys for store pages and availability listings.

Keys embed a per-store version token. Replacing the token orphans every
cached entry for the store at once, so invalidation never has to enumerate
dates. Tokens are random and never reused, so a version key that gets
evicted cannot bring an old generation of entries back.
"""

import uuid
from datetime import date

from django.conf import settings
from django.core.cache import cache


def _version_key(store_id: int) -> str:
    return f"stores:{store_id}:version"


def _new_token() -> str:
    return uuid.uuid4().hex


def store_version(store_id: int) -> str:
    key = _version_key(store_id)
    version = cache.get(key)
    if version is None:
        # add() keeps whichever token a concurrent reader stored first.
        cache.add(key, _new_token(), timeout=None)
        version = cache.get(key)
    return version


def store_detail_key(store_id: int, on_date: date) -> str:
    return f"stores:{store_id}:v{store_version(store_id)}:detail:{on_date.isoformat()}"


def store_items_key(store_id: int, on_date: date) -> str:
    return f"stores:{store_id}:v{store_version(store_id)}:items:{on_date.isoformat()}"


def invalidate_store(store_id: int) -> None:
    cache.set(_version_key(store_id), _new_token(), timeout=None)


def cache_timeout() -> int:
    return settings.RESERVATIONS["AVAILABILITY_CACHE_TIMEOUT"]
