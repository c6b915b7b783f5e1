"""
Core bit utilities для memory layout и циклической индексации

Целочисленные примитивы hot path и opt-in слой проверки предусловий.
"""

# Bit Utilities (hot path, без проверок)
from src.core.bits.bit_util import (
    # Constants
    CACHE_LINE_LENGTH,
    # Power of two & alignment
    align,
    find_next_positive_power_of_two,
    is_aligned,
    is_power_of_two,
    # Parity
    is_even,
    # Circular indexing
    next_index,
    previous_index,
)

# Preconditions (checked-версии)
from src.core.bits.preconditions import (
    DEFAULT_PRECONDITION_POLICY,
    BitUtilPreconditionError,
    BitUtilTypeError,
    PreconditionMode,
    PreconditionPolicy,
    checked_align,
    checked_is_aligned,
    checked_next_index,
    checked_previous_index,
    validate_capacity,
    validate_circular_index,
    validate_integer,
    validate_power_of_two,
)

__all__ = [
    # Bit Utilities — Constants
    "CACHE_LINE_LENGTH",
    # Bit Utilities — Power of two & alignment
    "align",
    "find_next_positive_power_of_two",
    "is_aligned",
    "is_power_of_two",
    # Bit Utilities — Parity
    "is_even",
    # Bit Utilities — Circular indexing
    "next_index",
    "previous_index",
    # Preconditions — Exceptions
    "BitUtilPreconditionError",
    "BitUtilTypeError",
    # Preconditions — Policy
    "DEFAULT_PRECONDITION_POLICY",
    "PreconditionMode",
    "PreconditionPolicy",
    # Preconditions — Checked operations
    "checked_align",
    "checked_is_aligned",
    "checked_next_index",
    "checked_previous_index",
    # Preconditions — Validation
    "validate_capacity",
    "validate_circular_index",
    "validate_integer",
    "validate_power_of_two",
]
