"""Layered key/value configuration loading and merging."""

import re
from collections.abc import Iterable, Sequence
from pathlib import Path  # noqa: TC003 - Used in runtime type annotations
from typing import TYPE_CHECKING

from warden.exceptions import ConfigLoadError

from ._models import ResolvedConfig

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

# Keys may not start with a comment marker or whitespace; values must be non-empty
_LINE_PATTERN = re.compile(r"^([^#\s][^=]*)=(.+)$")
_NUMERIC_SUFFIX = re.compile(r"^(.*)_([0-9]+)$")


def normalize_key(key: str) -> str:
    """Normalize a raw configuration key.

    Dots become underscores and a trailing `_<digits>` suffix is dropped,
    so `dbms.jvm.additional.2` and `dbms_jvm_additional` name the same
    parameter.

    Args:
        key: Key exactly as written in the source file.

    Returns:
        The effective parameter name.
    """
    normalized = key.replace(".", "_")
    match = _NUMERIC_SUFFIX.match(normalized)
    if match is not None:
        return match.group(1)
    return normalized


def parse_line(line: str) -> tuple[str, str] | None:
    """Parse one `key=value` line.

    Args:
        line: A raw line from a configuration source.

    Returns:
        The normalized key and the value, or None if the line is not an
        assignment (comment, blank line, malformed, or empty value).
    """
    match = _LINE_PATTERN.match(line.rstrip("\r\n"))
    if match is None:
        return None
    return normalize_key(match.group(1)), match.group(2)


def merge_lines(values: dict[str, str], lines: Iterable[str]) -> dict[str, str]:
    """Merge assignment lines into an accumulating mapping in place.

    A key seen again has its new value appended after a single space.

    Args:
        values: Mapping being accumulated across sources.
        lines: Lines of a single source, in order.

    Returns:
        The same mapping, for chaining.
    """
    for line in lines:
        parsed = parse_line(line)
        if parsed is None:
            continue
        key, value = parsed
        if key in values:
            values[key] = f"{values[key]} {value}"
        else:
            values[key] = value
    return values


def read_source(path: Path) -> list[str] | None:
    """Read the lines of a configuration source.

    Args:
        path: Path to the source file.

    Returns:
        The file's lines, or None if the file does not exist.

    Raises:
        ConfigLoadError: If the file exists but cannot be read or decoded.
    """
    try:
        with path.open(encoding="utf-8") as f:
            return f.readlines()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Failed to read configuration file {path}: {e}"
        raise ConfigLoadError(msg, path=path) from e


def load_config(
    sources: Sequence[Path],
    *,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> ResolvedConfig:
    """Load and merge ordered configuration sources.

    Later sources append to values set by earlier ones and never remove
    them. Missing sources are skipped.

    Args:
        sources: Source files in precedence order.
        logger: Optional logger for load diagnostics.

    Returns:
        The resolved configuration.

    Raises:
        ConfigLoadError: If a source exists but cannot be read.
    """
    values: dict[str, str] = {}
    read: list[Path] = []

    for path in sources:
        lines = read_source(path)
        if lines is None:
            if logger is not None:
                logger.debug("config_source_missing", path=str(path))
            continue
        merge_lines(values, lines)
        read.append(path)

    if logger is not None:
        logger.debug(
            "config_loaded",
            sources=[str(p) for p in read],
            keys=len(values),
        )

    return ResolvedConfig(values, sources=tuple(read))
