"""Primitive value types that have no direct Python counterpart."""

from __future__ import annotations


class Undefined:
    """The ``undefined`` value, distinct from ``None`` (``null``).

    There is exactly one instance, ``UNDEFINED``. It is falsy and renders
    as ``undefined``.
    """

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __str__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined()
