"""
In-memory quote store.
Holds the ordered quote collection and the id allocator behind a single lock.
"""

import threading
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from utils import store_logger, QuoteNotFoundError

from .models import Quote, SEED_QUOTES


def rfc3339_now() -> str:
    """当前本地时间，RFC3339 格式，精确到秒"""
    return datetime.now().astimezone().isoformat(timespec="seconds")


class QuoteStore:
    """内存语录存储

    所有读写操作都在同一把锁内完成，调用方看不到执行到一半的修改。
    next_id 只增不减，删除后的 id 不会被复用。
    """

    def __init__(self, seed: Optional[Iterable[Quote]] = None,
                 clock: Callable[[], str] = rfc3339_now):
        self._lock = threading.Lock()
        self._clock = clock

        created_at = clock()
        seed_quotes = SEED_QUOTES if seed is None else tuple(seed)
        self._quotes: List[Quote] = [
            replace(quote, added_at=quote.added_at or created_at) for quote in seed_quotes
        ]

        ids = [quote.id for quote in self._quotes]
        if len(ids) != len(set(ids)):
            raise ValueError("Seed quotes must have unique ids")
        self._next_id = max(ids, default=0) + 1

        store_logger.info(f"[QuoteStore] Initialized with {len(self._quotes)} quotes, next id {self._next_id}")

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._quotes)

    def list_quotes(self) -> List[Quote]:
        """返回当前全部语录的快照，按插入顺序"""
        with self._lock:
            return list(self._quotes)

    def get_quote(self, quote_id: int) -> Quote:
        """按 id 查找语录"""
        with self._lock:
            return self._quotes[self._index_of(quote_id)]

    def create_quote(self, candidate: Quote) -> Quote:
        """新增语录，忽略调用方提供的 id 与 added_at"""
        with self._lock:
            quote = replace(candidate, id=self._next_id, added_at=self._clock())
            self._next_id += 1
            self._quotes.append(quote)

        store_logger.info(f"[QuoteStore] Created quote {quote.id}")
        return quote

    def update_quote(self, quote_id: int, candidate: Quote) -> Quote:
        """整体替换指定语录，仅保留 id

        注意：这是全量替换而不是局部修改，candidate 中未提供的字段
        （包括 added_at）会被置为空字符串。
        """
        with self._lock:
            index = self._index_of(quote_id)
            quote = replace(candidate, id=quote_id)
            self._quotes[index] = quote

        store_logger.info(f"[QuoteStore] Updated quote {quote_id}")
        return quote

    def delete_quote(self, quote_id: int) -> None:
        """删除指定语录，其余语录保持原有顺序"""
        with self._lock:
            del self._quotes[self._index_of(quote_id)]

        store_logger.info(f"[QuoteStore] Deleted quote {quote_id}")

    def _index_of(self, quote_id: int) -> int:
        # 调用方必须已持有锁
        for index, quote in enumerate(self._quotes):
            if quote.id == quote_id:
                return index
        raise QuoteNotFoundError(quote_id)
