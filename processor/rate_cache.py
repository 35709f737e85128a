"""RPM 조회 결과 TTL 캐시 (프로세스 메모리, 비영속)."""

from __future__ import annotations

import threading
import time
from typing import Callable


class RateCache:
    """category_id -> (rate, fetched_at) 캐시.

    clock은 단조 증가 초 단위 함수 (테스트에서 가짜 시계 주입).
    락은 단일 항목 읽기/쓰기 동안만 잡는다.
    """

    def __init__(self, ttl_sec: float = 30 * 60, clock: Callable[[], float] = time.monotonic):
        if ttl_sec <= 0:
            raise ValueError(f"ttl_sec must be positive, got {ttl_sec}")
        self.ttl_sec = ttl_sec
        self._clock = clock
        self._entries: dict[str, tuple[float, float]] = {}
        self._lock = threading.Lock()

    def get(self, category_id: str) -> float | None:
        """TTL 이내 항목이면 rate, 아니면 None (만료 항목은 제거)."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(category_id)
            if entry is None:
                return None
            rate, fetched_at = entry
            if now - fetched_at >= self.ttl_sec:
                del self._entries[category_id]
                return None
            return rate

    def set(self, category_id: str, rate: float) -> None:
        now = self._clock()
        with self._lock:
            self._entries[category_id] = (rate, now)

    def invalidate(self, category_id: str) -> None:
        with self._lock:
            self._entries.pop(category_id, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, category_id: str) -> bool:
        return self.get(category_id) is not None
