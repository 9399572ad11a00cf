from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

Record = Mapping[str, Any]


class EntityRepository(Protocol):
    """Interface for one domain collection.

    Note (DIP): forms, pages and the dashboard depend on this interface, not on
    the HTTP client directly.
    """

    collection: str

    def list_all(self) -> Sequence[Record]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Record:
        raise NotImplementedError

    def create(self, data: Mapping[str, Any]) -> Optional[Record]:
        raise NotImplementedError

    def update(self, record_id: int, data: Mapping[str, Any]) -> Optional[Record]:
        raise NotImplementedError

    def delete(self, record_id: int) -> None:
        raise NotImplementedError
