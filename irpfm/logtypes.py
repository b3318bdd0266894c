"""Main and sub log categories."""

from enum import IntEnum


class MainLog(IntEnum):
    NONE = 0
    SYSTEM = 1
    IRP = 2
    COMP = 3
    SEEDLING = 4
    ROOTLING = 5


class SubLog(IntEnum):
    NONE = 0
    SYSTEM = 1
    IRP = 2
    COMP = 3
    SEEDLING = 4
    ROOTLING = 5


def main_log_name(value: int) -> str:
    """Return the name of a main log type, or ``unknown_main_type``."""
    if is_valid_main_log(value):
        return f"main_{MainLog(value).name.lower()}"
    return "unknown_main_type"


def sub_log_name(value: int) -> str:
    """Return the name of a sub log type, or ``unknown_sub_type``."""
    if is_valid_sub_log(value):
        return f"sub_{SubLog(value).name.lower()}"
    return "unknown_sub_type"


def is_valid_main_log(value: int) -> bool:
    return MainLog.NONE <= value <= MainLog.ROOTLING


def is_valid_sub_log(value: int) -> bool:
    return SubLog.NONE <= value <= SubLog.ROOTLING