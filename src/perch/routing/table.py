"""Append-only route table."""

from collections.abc import Iterator
from typing import Any

from perch.routing.route import RouteRecord


class RouteTable:
    """Registration-ordered route records plus an optional default payload.

    Order is significant: the resolver walks records front to back.
    Records are frozen, so ``snapshot()`` only needs a new list.
    """

    __slots__ = ("_default", "_has_default", "_records")

    def __init__(self) -> None:
        self._records: list[RouteRecord] = []
        self._default: Any = None
        self._has_default = False

    def append(self, record: RouteRecord) -> None:
        self._records.append(record)

    def set_default(self, payload: Any) -> None:
        """Store *payload* as the default. Last write wins."""
        self._default = payload
        self._has_default = True

    @property
    def default(self) -> Any:
        return self._default

    @property
    def has_default(self) -> bool:
        return self._has_default

    def snapshot(self) -> list[RouteRecord]:
        """Return the records in registration order as an independent list."""
        return list(self._records)

    def __iter__(self) -> Iterator[RouteRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
