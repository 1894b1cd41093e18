"""Shared utilities for warden."""

from ._logging import (
    LogFormatType,
    controller_logger,
    create_null_logger,
    open_file_logger,
)
from ._version import get_package_version

__all__ = [
    "LogFormatType",
    "controller_logger",
    "create_null_logger",
    "get_package_version",
    "open_file_logger",
]
