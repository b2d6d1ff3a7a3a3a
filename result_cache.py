"""In-process TTL cache for lease assessments."""
import hashlib
import logging
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from schemas import LeaseAnalysisResponse

logger = logging.getLogger(__name__)

CACHE_PREFIX = "lease-analysis"


def generate_cache_key(document_id: str, country_code: str, region_code: Optional[str] = None) -> str:
    """
    Derive a stable key from the document identity and the jurisdiction.

    A missing region is encoded differently from every real region so
    ``("in", None)`` and ``("in", "none")`` never collide.
    """
    country = (country_code or "").strip().lower()
    region = f"r={region_code.strip().lower()}" if region_code and region_code.strip() else "r~"
    base = f"doc={document_id}|c={country}|{region}"
    digest = hashlib.sha1(base.encode("utf-8")).hexdigest()
    return f"{CACHE_PREFIX}:{digest}"


class ResultCache:
    """
    Thread-safe mapping of cache key to assessment with per-entry expiry.

    A ``get`` past the expiry time removes that entry and reports a miss; every
    ``set`` also drops all entries that have already expired. Values are copied on the way in and out so callers never
    share an instance with the cache.
    """

    def __init__(self, default_ttl_seconds: float = 600, clock: Callable[[], float] = time.monotonic):
        self.default_ttl_seconds = default_ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[LeaseAnalysisResponse, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[LeaseAnalysisResponse]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                logger.debug(f"Cache entry expired: {key}")
                return None
        return value.model_copy(deep=True)

    def set(self, key: str, value: LeaseAnalysisResponse, ttl_seconds: Optional[float] = None) -> None:
        ttl = self.default_ttl_seconds if ttl_seconds is None else ttl_seconds
        if ttl <= 0:
            return
        stored = value.model_copy(deep=True)
        with self._lock:
            now = self._clock()
            removed = self._drop_expired(now)
            if removed:
                logger.debug(f"Dropped {removed} expired cache entries")
            self._entries[key] = (stored, now + ttl)

    def purge_expired(self) -> int:
        """Drop every expired entry and return how many were removed."""
        with self._lock:
            return self._drop_expired(self._clock())

    def _drop_expired(self, now: float) -> int:
        # Caller holds the lock
        expired = [key for key, (_, expires_at) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
