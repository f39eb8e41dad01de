"""In-Memory Table Store — fixed registry of valid table ids."""

from typing import Iterable

from restaurant_api.core.domain_types import DEFAULT_TABLE_COUNT, TableId
from restaurant_api.core.errors import ErrorContext, TablesRetrieveError
from restaurant_api.infrastructure.locking import GuardedLock


def _tables_retrieve_error(detail: str) -> TablesRetrieveError:
    return TablesRetrieveError(ErrorContext(debug_info={"detail": detail}))


class InMemoryTableStore:
    """Table registry backed by a lock-guarded list, seeded 1..table_count by default."""

    def __init__(
        self, tables: Iterable[TableId] | None = None, lock_timeout: float = 5.0,
    ):
        if tables is None:
            tables = [TableId(i) for i in range(1, DEFAULT_TABLE_COUNT + 1)]
        self._tables = list(tables)
        self._lock = GuardedLock("table", _tables_retrieve_error, lock_timeout)

    @classmethod
    def with_table_count(
        cls, table_count: int, lock_timeout: float = 5.0,
    ) -> "InMemoryTableStore":
        if table_count < 1:
            raise ValueError("table_count must be at least 1")
        return cls([TableId(i) for i in range(1, table_count + 1)], lock_timeout)

    def get_all_tables(self) -> list[TableId]:
        with self._lock.hold():
            return list(self._tables)
