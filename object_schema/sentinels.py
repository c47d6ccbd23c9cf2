"""Sentinel marking a missing value during merges."""

from __future__ import annotations


class _Absent:
    """Singleton type for ``ABSENT``.

    Merge callables receive ``ABSENT`` for a key missing from either side and
    return it to drop the key from the merged record. ``None`` stays an
    ordinary value.
    """

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Absent":
        return self

    def __deepcopy__(self, memo: dict) -> "_Absent":
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()
