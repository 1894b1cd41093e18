"""Resolved configuration model.

This module provides ResolvedConfig, the read-only mapping of normalized
parameter names to string values produced by the configuration loader.
"""

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import final, overload

_TRUE_VALUES = frozenset({"true", "yes", "on", "1"})


@final
class ResolvedConfig(Mapping[str, str]):
    """Immutable mapping of resolved runtime parameters.

    Keys are normalized parameter names (dots replaced by underscores,
    numeric suffixes folded into their base name). Values are opaque
    strings until a consumer interprets them.

    Attributes:
        sources: Configuration files that were actually read, in order.
    """

    __slots__ = ("_values", "sources")

    def __init__(
        self,
        values: Mapping[str, str] | None = None,
        *,
        sources: tuple[Path, ...] = (),
    ) -> None:
        """Initialize from an already-merged mapping.

        Args:
            values: Normalized parameter names and their values.
            sources: Files the values were read from.
        """
        self._values: dict[str, str] = dict(values or {})
        self.sources: tuple[Path, ...] = sources

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ResolvedConfig({self._values!r})"

    @overload
    def get(self, key: str, /) -> str | None: ...

    @overload
    def get(self, key: str, default: str, /) -> str: ...

    def get(self, key: str, default: str | None = None, /) -> str | None:
        """Return the value for key, treating empty values as missing."""
        value = self._values.get(key)
        return value if value else default

    def get_bool(self, key: str, *, default: bool = False) -> bool:
        """Interpret a value as a boolean flag.

        Args:
            key: Normalized parameter name.
            default: Result when the key is absent.

        Returns:
            True for "true", "yes", "on" or "1" (case-insensitive).
        """
        value = self.get(key)
        if value is None:
            return default
        return value.strip().lower() in _TRUE_VALUES

    def get_path(self, key: str, root: Path, default: str) -> Path:
        """Interpret a value as a path relative to root.

        Absolute values are returned unchanged.

        Args:
            key: Normalized parameter name.
            root: Directory that relative values resolve against.
            default: Relative or absolute path used when the key is absent.

        Returns:
            The resolved path.
        """
        return root / self.get(key, default)
