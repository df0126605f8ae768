"""Transport interface consumed by the release handles."""

from contextlib import AbstractAsyncContextManager
from typing import Any, Callable, Protocol, TypeVar

import httpx

T = TypeVar("T")

Decoder = Callable[[Any], T]


class TransportError(Exception):
    """Request failed, or its response could not be decoded."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class Transport(Protocol):
    """The request verbs the handles rely on.

    Implementations share one connection pool between every handle that
    holds them, so they must be safe to use from concurrent tasks.
    """

    async def get(self, path: str, decode: Decoder[T]) -> T: ...

    async def post(self, path: str, body: dict, decode: Decoder[T]) -> T: ...

    async def post_type(
        self, path: str, content: bytes, content_type: str, decode: Decoder[T]
    ) -> T: ...

    async def patch(self, path: str, body: dict, decode: Decoder[T]) -> T: ...

    async def delete(self, path: str) -> None: ...

    def stream(
        self, url: str, accept: str = "application/octet-stream"
    ) -> AbstractAsyncContextManager[httpx.Response]:
        """Open a streamed GET whose body is read by the caller."""
        ...


def list_of(decode: Callable[[Any], T]) -> Decoder[list[T]]:
    """Lift an item decoder into one that decodes a JSON array."""

    def decode_list(data: Any) -> list[T]:
        if not isinstance(data, list):
            raise TypeError(f"expected a JSON array, got {type(data).__name__}")
        return [decode(item) for item in data]

    return decode_list
