from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, TypeVar

T = TypeVar("T")

Decoder = Callable[[Any], T]


class KeyValueStore(Protocol):
    """Durable storage of whole values under stable keys.

    Note: a read never fails. A missing key, a payload that is not JSON, or a
    payload the ``decoder`` cannot shape all yield ``default``.
    """

    def read(self, key: str, default: T, *, decoder: Optional[Decoder] = None) -> T:
        raise NotImplementedError

    def write(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def keys(self) -> list[str]:
        raise NotImplementedError
