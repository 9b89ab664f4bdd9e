"""Typed results returned by every core operation.

Core operations never raise for domain failures. They return either ``Ok``
carrying the value or ``Failure`` carrying an ``ErrorKind`` so the transport
layer can pick a response code without parsing messages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterable, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    VALIDATION_FAILED = "validation_failed"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True)
class FieldError:
    """A single violated field constraint."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    kind: ErrorKind
    message: str
    errors: tuple[FieldError, ...] = field(default_factory=tuple)


Result = Union[Ok[T], Failure]


def not_found(message: str) -> Failure:
    return Failure(ErrorKind.NOT_FOUND, message)


def forbidden(message: str) -> Failure:
    return Failure(ErrorKind.FORBIDDEN, message)


def conflict(message: str) -> Failure:
    return Failure(ErrorKind.CONFLICT, message)


def validation_failed(errors: Iterable[FieldError], message: str = "Datos inválidos") -> Failure:
    return Failure(ErrorKind.VALIDATION_FAILED, message, tuple(errors))
