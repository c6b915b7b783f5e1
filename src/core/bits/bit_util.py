"""
Bit Utilities — Integer Primitives for Memory Layout & Circular Indexing

Модуль содержит чистые целочисленные примитивы для hot path:
- Проверка power of two
- Выравнивание (alignment) до границы степени двойки
- Проверка чётности
- Циклический инкремент/декремент индекса (wrap-around)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции чистые: без состояния, без I/O, без логирования
2. Предусловия (power-of-two alignment, current в [0, max)) НЕ проверяются,
   ответственность вызывающего кода (см. preconditions.py для checked-версий)
3. Только целые типы: ограничение выражено через аннотации `int`,
   статический type checker отклоняет float
4. Для валидных входов функции никогда не бросают исключений
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Размер блока данных кэш-подсистемы CPU (байты)
# Используется для padding/alignment, чтобы избежать false sharing
CACHE_LINE_LENGTH: Final[int] = 64


# =============================================================================
# POWER OF TWO & ALIGNMENT
# =============================================================================


def is_power_of_two(value: int) -> bool:
    """
    Проверка, является ли значение степенью двойки.

    Алгоритм: value > 0 and (value & -value) == value

    `-value` это two's-complement отрицание (~value + 1), поэтому
    value & -value выделяет младший установленный бит. Проверка
    положительности обязательна: для нуля тождество выполняется тривиально.

    Args:
        value: Любое целое (знаковое или беззнаковое)

    Returns:
        True если value > 0 и ровно один бит установлен

    Examples:
        >>> is_power_of_two(16)
        True
        >>> is_power_of_two(18)
        False
        >>> is_power_of_two(0)
        False
        >>> is_power_of_two(-8)
        False
    """
    return value > 0 and (value & -value) == value


def align(value: int, alignment: int) -> int:
    """
    Округление value вверх до ближайшего кратного alignment.

    Алгоритм: (value + alignment - 1) & ~(alignment - 1)

    ПРЕДУСЛОВИЕ: alignment должен быть степенью двойки (не проверяется).
    Для других значений (включая 0) результат численно бессмыслен,
    но исключение не бросается.

    Args:
        value: Значение для выравнивания
        alignment: Граница выравнивания (степень двойки)

    Returns:
        Наименьшее кратное alignment, которое >= value

    Examples:
        >>> align(13, 8)
        16
        >>> align(16, 8)
        16
        >>> align(1, CACHE_LINE_LENGTH)
        64
    """
    return (value + (alignment - 1)) & ~(alignment - 1)


def is_aligned(value: int, alignment: int) -> bool:
    """
    Проверка, что value кратно alignment.

    ПРЕДУСЛОВИЕ: alignment должен быть степенью двойки (не проверяется).

    Examples:
        >>> is_aligned(128, CACHE_LINE_LENGTH)
        True
        >>> is_aligned(100, CACHE_LINE_LENGTH)
        False
    """
    return (value & (alignment - 1)) == 0


def find_next_positive_power_of_two(value: int) -> int:
    """
    Наименьшая степень двойки, которая >= value.

    Для value <= 0 возвращает 1.

    Examples:
        >>> find_next_positive_power_of_two(1000)
        1024
        >>> find_next_positive_power_of_two(1024)
        1024
        >>> find_next_positive_power_of_two(0)
        1
    """
    if value <= 1:
        return 1

    return 1 << (value - 1).bit_length()


# =============================================================================
# ЧЁТНОСТЬ
# =============================================================================


def is_even(value: int) -> bool:
    """
    Проверка чётности по младшему биту.

    Не зависит от знака: для отрицательных значений младший бит
    two's-complement представления совпадает с чётностью.

    Examples:
        >>> is_even(7)
        False
        >>> is_even(-4)
        True
    """
    return (value & 1) == 0


# =============================================================================
# ЦИКЛИЧЕСКИЕ ИНДЕКСЫ (WRAP-AROUND)
# =============================================================================


def next_index(current: int, max_value: int) -> int:
    """
    Циклический инкремент индекса.

    Один шаг вперёд: current + 1, с переходом в 0 при достижении max_value.
    Это НЕ обобщённая операция modulo.

    ПРЕДУСЛОВИЕ: 0 <= current < max_value (не проверяется).

    Args:
        current: Текущий индекс
        max_value: Исключающая верхняя граница (ёмкость буфера)

    Returns:
        Следующий индекс в [0, max_value)

    Examples:
        >>> next_index(2, 6)
        3
        >>> next_index(5, 6)
        0
    """
    following = current + 1
    if following == max_value:
        following = 0

    return following


def previous_index(current: int, max_value: int) -> int:
    """
    Циклический декремент индекса.

    Один шаг назад: current - 1, с переходом в max_value - 1 из нуля.

    ПРЕДУСЛОВИЕ: 0 <= current < max_value, max_value >= 1 (не проверяется).

    Args:
        current: Текущий индекс
        max_value: Исключающая верхняя граница (ёмкость буфера)

    Returns:
        Предыдущий индекс в [0, max_value)

    Examples:
        >>> previous_index(3, 6)
        2
        >>> previous_index(0, 6)
        5
    """
    if current == 0:
        return max_value - 1

    return current - 1
