"""
Numeric Capability — Контракт числового типа для hyperoperation

Минимальный набор операций, который должен поддерживать тип T, чтобы
использоваться как base гипероперации:
- zero / one
- successor (x + 1) и predecessor (x - 1)
- сравнение с zero / one
- to_count: превращение промежуточного результата T в число повторений
  для следующего (более низкого) ранга

Вычитание и деление в общем виде НЕ требуются.

NativeCapability дополнительно даёт нативные shortcuts (+, *, **) для
рангов 1, 2, 3. Подходит для int, Fraction, Decimal, numpy scalars, gmpy2.mpz
и любых типов, конструируемых из int. Поведение при переполнении
(wrap, exception, неограниченный рост) целиком определяется самим типом.
"""

import operator
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Final, Generic, TypeVar

T = TypeVar("T")

# Операторы, без которых тип не может использовать нативные shortcuts
REQUIRED_NATIVE_OPERATORS: Final[tuple[str, ...]] = (
    "__add__",
    "__sub__",
    "__mul__",
    "__pow__",
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumericCapabilityError(TypeError):
    """
    Тип значения не удовлетворяет контракту NumericCapability.

    Возникает при разрешении capability для неподходящего типа (str, bool,
    None, ...) или при попытке превратить нецелое значение в count.
    """
    pass


# =============================================================================
# CAPABILITY CONTRACT
# =============================================================================


class NumericCapability(ABC, Generic[T]):
    """
    Контракт числового типа T.

    Обязательные операции: zero, one, successor, predecessor.
    is_zero / is_one / to_count имеют реализации по умолчанию, построенные
    только на обязательных операциях, поэтому пользовательскому типу
    (например, числам Пеано) достаточно четырёх методов.

    Контракт рассчитан на беззнаковые значения: to_count по умолчанию
    считает predecessor до нуля.
    """

    @abstractmethod
    def zero(self) -> T:
        """Нейтральный элемент сложения."""

    @abstractmethod
    def one(self) -> T:
        """Нейтральный элемент умножения."""

    @abstractmethod
    def successor(self, value: T) -> T:
        """value + 1"""

    @abstractmethod
    def predecessor(self, value: T) -> T:
        """value - 1"""

    def is_zero(self, value: T) -> bool:
        return value == self.zero()

    def is_one(self, value: T) -> bool:
        return value == self.one()

    def to_count(self, value: T) -> int:
        """
        Превращение значения T в число повторений.

        По умолчанию: число применений predecessor до нуля.

        Args:
            value: Промежуточный результат гипероперации

        Returns:
            Число повторений (int >= 0)
        """
        count = 0
        while not self.is_zero(value):
            value = self.predecessor(value)
            count += 1
        return count


class NativeCapability(NumericCapability[T]):
    """
    Capability для типов с нативной арифметикой.

    Тип должен конструироваться из int (numeric_type(0), numeric_type(1))
    и поддерживать +, -, *, **.

    Нативные shortcuts:
        rank 1: add(value, count)      = value + T(count)
        rank 2: multiply(value, count) = value * T(count)
        rank 3: power(value, count)    = value ** count

    Если T не вмещает count (OverflowError при конверсии, как у numpy
    uint8), shortcuts считаются только операциями над значениями T и
    дают тот же результат, что и цепочка successor.
    """

    def __init__(self, numeric_type: type):
        """
        Args:
            numeric_type: Числовой тип (int, Fraction, Decimal, ...)

        Raises:
            NumericCapabilityError: Если тип не конструируется из int
        """
        try:
            zero = numeric_type(0)
            one = numeric_type(1)
        except (TypeError, ValueError) as e:
            raise NumericCapabilityError(
                f"{numeric_type.__name__} cannot be constructed from int: {e}"
            ) from e

        self.numeric_type = numeric_type
        self._zero = zero
        self._one = one

    def __repr__(self) -> str:
        return f"NativeCapability({self.numeric_type.__name__})"

    def zero(self) -> T:
        return self._zero

    def one(self) -> T:
        return self._one

    def successor(self, value: T) -> T:
        return value + self._one

    def predecessor(self, value: T) -> T:
        return value - self._one

    def to_count(self, value: T) -> int:
        """
        Конверсия через operator.index, для остальных типов — через int()
        с проверкой целочисленности.

        Raises:
            NumericCapabilityError: Если значение нецелое или не приводится к int
        """
        try:
            return operator.index(value)
        except TypeError:
            pass

        try:
            count = int(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise NumericCapabilityError(
                f"Cannot use {value!r} as a repetition count: {e}"
            ) from e

        if count != value:
            raise NumericCapabilityError(
                f"Cannot use non-integral {value!r} as a repetition count"
            )

        return count

    def from_count(self, count: int) -> T:
        return self.numeric_type(count)

    def add(self, value: T, count: int) -> T:
        """
        value + count.

        Если count не помещается в T (fixed-width тип), результат считается
        удвоением внутри T и совпадает с count применениями successor.
        """
        try:
            increment = self.from_count(count)
        except OverflowError:
            increment = _scale(self._one, count, self._zero)
        return value + increment

    def multiply(self, value: T, count: int) -> T:
        """value * count, с тем же fallback, что и add."""
        try:
            factor = self.from_count(count)
        except OverflowError:
            return _scale(value, count, self._zero)
        return value * factor

    def power(self, value: T, count: int) -> T:
        """value ** count; fallback — возведение в квадрат внутри T."""
        try:
            return value ** count
        except OverflowError:
            return _raise(value, count, self._one)


def _scale(value: Any, count: int, zero: Any) -> Any:
    # Double-and-add: только сложения значений T
    result = zero
    while count:
        if count & 1:
            result = result + value
        count >>= 1
        if count:
            value = value + value
    return result


def _raise(value: Any, count: int, one: Any) -> Any:
    # Square-and-multiply: только умножения значений T
    result = one
    while count:
        if count & 1:
            result = result * value
        count >>= 1
        if count:
            value = value * value
    return result


# =============================================================================
# RESOLUTION
# =============================================================================


@lru_cache(maxsize=None)
def _native_capability(numeric_type: type) -> NativeCapability:
    missing = [name for name in REQUIRED_NATIVE_OPERATORS if not hasattr(numeric_type, name)]
    if missing:
        raise NumericCapabilityError(
            f"{numeric_type.__name__} does not support required operators: {', '.join(missing)}"
        )

    return NativeCapability(numeric_type)


def capability_for(value: Any) -> NativeCapability:
    """
    Разрешение NativeCapability для типа значения.

    Capability кэшируется по типу.

    Args:
        value: base гипероперации

    Returns:
        NativeCapability для type(value)

    Raises:
        NumericCapabilityError: Если тип не поддерживает нужные операторы

    Examples:
        >>> capability_for(3)
        NativeCapability(int)
        >>> capability_for(3).successor(3)
        4
    """
    if isinstance(value, bool):
        raise NumericCapabilityError("bool is not a valid hyperoperation base")

    return _native_capability(type(value))
