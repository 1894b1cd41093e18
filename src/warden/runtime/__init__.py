"""Runtime collaborators: Java discovery and startup arguments."""

from ._banner import start_message
from ._java import (
    JAVA_REMEDY,
    MINIMUM_JAVA_VERSION,
    JavaRuntime,
    check_java,
    find_java,
    parse_java_version,
)
from ._options import (
    ARBITER_ENTRY_POINT,
    SERVER_ENTRY_POINT,
    build_command,
    classpath,
    entry_point,
    gc_log_options,
    heap_size,
    jvm_options,
    split_flags,
)

__all__ = [
    "ARBITER_ENTRY_POINT",
    "JAVA_REMEDY",
    "MINIMUM_JAVA_VERSION",
    "SERVER_ENTRY_POINT",
    "JavaRuntime",
    "build_command",
    "check_java",
    "classpath",
    "entry_point",
    "find_java",
    "gc_log_options",
    "heap_size",
    "jvm_options",
    "parse_java_version",
    "split_flags",
    "start_message",
]
