"""
Result types returned by the data access layer.

Repositories never raise for expected failures. Each operation returns one of:

- ``Ok(value)``     the operation succeeded
- ``NotFound()``    no document matched the given id
- ``StoreError()``  the store rejected the call (connectivity, malformed id, ...)

The HTTP layer performs the single mapping from these to status codes.
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class StoreError:
    operation: str
    reason: str
    exception: Optional[BaseException] = None


StoreResult = Union[Ok[T], NotFound, StoreError]
