"""Status codes shared across subsystem boundaries."""

from enum import Enum


class ReaderState(str, Enum):
    """Lifecycle state of a checkpointed reader.

    UNOPENED -> OPEN -> CLOSED, and CLOSED -> OPEN again on a fresh open().
    """

    UNOPENED = "unopened"
    OPEN = "open"
    CLOSED = "closed"


class ContextValueType(str, Enum):
    """Type tag for primitive checkpoint context values.

    Uses (str, Enum) because this IS stored in the database
    (checkpoint_entries.value_type).
    """

    INT = "int"
    FLOAT = "float"
    STR = "str"
