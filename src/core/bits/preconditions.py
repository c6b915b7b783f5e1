"""
Preconditions — Checked Variants of Bit Utilities

Hot-path примитивы из bit_util.py не проверяют предусловия.
Модуль даёт opt-in слой проверок для отладки и для кода вне hot path:
- Валидаторы предусловий (power-of-two alignment, ёмкость, индекс в диапазоне)
- PreconditionPolicy: immutable Pydantic политика (off / warn / raise)
- Checked-обёртки, применяющие политику перед вызовом примитива

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. mode=off → поведение идентично примитиву (без проверок и логов)
2. mode=warn → нарушение логируется, возвращается непроверенный результат
   (кроме нецелых аргументов: TypeError-нарушение бросается всегда)
3. mode=raise → нарушение логируется и бросается BitUtilPreconditionError
4. Политика immutable, глобального изменяемого состояния нет
"""

import numbers
from enum import Enum
from typing import Any, Callable, Dict, Final

import structlog
from pydantic import BaseModel, Field

from src.core.bits.bit_util import (
    align,
    is_aligned,
    is_power_of_two,
    next_index,
    previous_index,
)

logger = structlog.get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BitUtilPreconditionError(ValueError):
    """
    Нарушение предусловия checked-операции.

    Attributes:
        operation: Имя операции (например, 'align')
        reason: Краткое описание нарушения
        arguments: Аргументы вызова для диагностики
    """

    def __init__(self, operation: str, reason: str, arguments: Dict[str, Any]):
        self.operation = operation
        self.reason = reason
        self.arguments = dict(arguments)
        details = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
        super().__init__(f"{operation}: {reason} ({details})")


class BitUtilTypeError(BitUtilPreconditionError, TypeError):
    """Аргумент не является целым числом."""


# =============================================================================
# POLICY
# =============================================================================


class PreconditionMode(str, Enum):
    """Режим проверки предусловий"""

    OFF = "off"
    WARN = "warn"
    RAISE = "raise"


class PreconditionPolicy(BaseModel):
    """
    Политика проверки предусловий для checked-операций.

    Immutable модель (frozen=True), передаётся явно в каждый вызов.
    """

    mode: PreconditionMode = Field(
        default=PreconditionMode.RAISE,
        description="Реакция на нарушение предусловия (off/warn/raise)",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def enabled(self) -> bool:
        """True если проверки выполняются."""
        return self.mode is not PreconditionMode.OFF


DEFAULT_PRECONDITION_POLICY: Final[PreconditionPolicy] = PreconditionPolicy()


# =============================================================================
# ВАЛИДАТОРЫ
# =============================================================================


def validate_integer(value: Any, name: str, operation: str = "validate_integer") -> None:
    """
    Валидация, что значение целое (bool не допускается).

    Raises:
        BitUtilTypeError: Если value не целое
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise BitUtilTypeError(
            operation, f"{name} must be an integer, got {type(value).__name__}", {name: value}
        )


def validate_power_of_two(
    value: int, name: str, operation: str = "validate_power_of_two"
) -> None:
    """
    Валидация, что значение является степенью двойки.

    Raises:
        BitUtilTypeError: Если value не целое
        BitUtilPreconditionError: Если value не степень двойки (включая 0 и < 0)
    """
    validate_integer(value, name, operation)

    if not is_power_of_two(value):
        raise BitUtilPreconditionError(
            operation, f"{name} must be a power of two", {name: value}
        )


def validate_capacity(max_value: int, operation: str = "validate_capacity") -> None:
    """
    Валидация ёмкости циклического диапазона: max_value >= 1.

    Raises:
        BitUtilTypeError: Если max_value не целое
        BitUtilPreconditionError: Если max_value < 1
    """
    validate_integer(max_value, "max_value", operation)

    if max_value < 1:
        raise BitUtilPreconditionError(
            operation, "max_value must be >= 1", {"max_value": max_value}
        )


def validate_circular_index(
    current: int, max_value: int, operation: str = "validate_circular_index"
) -> None:
    """
    Валидация циклического индекса: 0 <= current < max_value.

    Raises:
        BitUtilTypeError: Если аргументы не целые
        BitUtilPreconditionError: Если max_value < 1 или current вне диапазона
    """
    validate_integer(current, "current", operation)
    validate_capacity(max_value, operation)

    if not 0 <= current < max_value:
        raise BitUtilPreconditionError(
            operation,
            "current must be in [0, max_value)",
            {"current": current, "max_value": max_value},
        )


# =============================================================================
# CHECKED-ОБЁРТКИ
# =============================================================================


def _enforce(policy: PreconditionPolicy, check: Callable[[], None]) -> None:
    """Применение политики к проверке предусловия."""
    if not policy.enabled:
        return

    try:
        check()
    except BitUtilPreconditionError as exc:
        logger.warning(
            "bit_util_precondition_violated",
            operation=exc.operation,
            reason=exc.reason,
            mode=policy.mode.value,
            arguments=exc.arguments,
        )
        # Нецелый аргумент: примитив не может дать результат
        if policy.mode is PreconditionMode.RAISE or isinstance(exc, TypeError):
            raise


def checked_align(
    value: int,
    alignment: int,
    policy: PreconditionPolicy = DEFAULT_PRECONDITION_POLICY,
) -> int:
    """
    align() с проверкой power-of-two alignment.

    Examples:
        >>> checked_align(13, 8)
        16
        >>> checked_align(13, 6)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        BitUtilPreconditionError: align: alignment must be a power of two ...
    """

    def check() -> None:
        validate_integer(value, "value", "align")
        validate_power_of_two(alignment, "alignment", "align")

    _enforce(policy, check)
    return align(value, alignment)


def checked_is_aligned(
    value: int,
    alignment: int,
    policy: PreconditionPolicy = DEFAULT_PRECONDITION_POLICY,
) -> bool:
    """is_aligned() с проверкой power-of-two alignment."""

    def check() -> None:
        validate_integer(value, "value", "is_aligned")
        validate_power_of_two(alignment, "alignment", "is_aligned")

    _enforce(policy, check)
    return is_aligned(value, alignment)


def checked_next_index(
    current: int,
    max_value: int,
    policy: PreconditionPolicy = DEFAULT_PRECONDITION_POLICY,
) -> int:
    """next_index() с проверкой 0 <= current < max_value."""
    _enforce(policy, lambda: validate_circular_index(current, max_value, "next_index"))
    return next_index(current, max_value)


def checked_previous_index(
    current: int,
    max_value: int,
    policy: PreconditionPolicy = DEFAULT_PRECONDITION_POLICY,
) -> int:
    """previous_index() с проверкой 0 <= current < max_value."""
    _enforce(policy, lambda: validate_circular_index(current, max_value, "previous_index"))
    return previous_index(current, max_value)
