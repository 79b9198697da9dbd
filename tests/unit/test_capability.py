"""
Тесты для Numeric Capability — контракт числового типа

Проверяемые инварианты:
1. Пользовательский тип достаточно описать четырьмя операциями
2. to_count по умолчанию построен на predecessor / is_zero
3. NativeCapability сохраняет тип и его поведение при переполнении
   (в том числе когда count не помещается в fixed-width тип)
4. Неподходящие типы отвергаются NumericCapabilityError
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from hyperoperation.core.math.capability import (
    NativeCapability,
    NumericCapability,
    NumericCapabilityError,
    capability_for,
)
from hyperoperation.core.math.evaluator import EvaluationConfig, evaluate, hyperoperation

PURE = EvaluationConfig(use_native_shortcuts=False)


# =============================================================================
# HELPERS
# =============================================================================


class PeanoCapability(NumericCapability):
    """Числа Пеано: () = 0, (n,) = n + 1."""

    def zero(self):
        return ()

    def one(self):
        return ((),)

    def successor(self, value):
        return (value,)

    def predecessor(self, value):
        return value[0]


def peano(n: int) -> tuple:
    value = ()
    for _ in range(n):
        value = (value,)
    return value


class U8(int):
    """Беззнаковое 8-битное число с wrap-around."""

    def __new__(cls, value=0):
        return super().__new__(cls, int(value) % 256)

    def __add__(self, other):
        return U8(int(self) + int(other))

    def __sub__(self, other):
        return U8(int(self) - int(other))

    def __mul__(self, other):
        return U8(int(self) * int(other))

    def __pow__(self, other):
        return U8(pow(int(self), int(other), 256))


class Checked8(int):
    """
    8-битное число как numpy.uint8: арифметика с wrap-around, но
    конструирование из int вне [0, 255] даёт OverflowError.
    """

    def __new__(cls, value=0):
        value = int(value)
        if not 0 <= value <= 255:
            raise OverflowError(f"Python integer {value} out of bounds for Checked8")
        return super().__new__(cls, value)

    @classmethod
    def _wrap(cls, value):
        return super().__new__(cls, value % 256)

    def __add__(self, other):
        return Checked8._wrap(int(self) + int(Checked8(other)))

    def __sub__(self, other):
        return Checked8._wrap(int(self) - int(Checked8(other)))

    def __mul__(self, other):
        return Checked8._wrap(int(self) * int(Checked8(other)))

    def __pow__(self, other):
        return Checked8._wrap(pow(int(self), int(Checked8(other)), 256))


# =============================================================================
# ТЕСТЫ: Пользовательский контракт
# =============================================================================


class TestCustomCapability:
    """Числа Пеано без нативной арифметики."""

    def test_default_predicates(self):
        capability = PeanoCapability()
        assert capability.is_zero(peano(0))
        assert not capability.is_zero(peano(1))
        assert capability.is_one(peano(1))
        assert not capability.is_one(peano(2))

    def test_default_to_count(self):
        capability = PeanoCapability()
        assert capability.to_count(peano(0)) == 0
        assert capability.to_count(peano(5)) == 5

    def test_evaluate_each_rank(self):
        capability = PeanoCapability()
        assert evaluate(peano(3), 0, 9, capability) == peano(4)
        assert evaluate(peano(3), 1, 2, capability) == peano(5)
        assert evaluate(peano(3), 2, 3, capability) == peano(9)
        assert evaluate(peano(2), 3, 3, capability) == peano(8)
        assert evaluate(peano(2), 4, 3, capability) == peano(16)

    def test_zero_count_identities(self):
        capability = PeanoCapability()
        assert evaluate(peano(4), 2, 0, capability) == peano(0)
        assert evaluate(peano(4), 3, 0, capability) == peano(1)
        assert evaluate(peano(4), 5, 1, capability) == peano(4)

    def test_native_shortcuts_not_applied(self):
        """Shortcuts используются только для NativeCapability."""
        capability = PeanoCapability()
        result = evaluate(peano(2), 3, 2, capability, EvaluationConfig(use_native_shortcuts=True))
        assert result == peano(4)

    def test_abstract_methods_required(self):
        class Incomplete(NumericCapability):
            def zero(self):
                return 0

        with pytest.raises(TypeError):
            Incomplete()


# =============================================================================
# ТЕСТЫ: NativeCapability
# =============================================================================


class TestNativeCapability:
    """Типы с нативной арифметикой."""

    def test_int_operations(self):
        capability = capability_for(10)
        assert capability.zero() == 0
        assert capability.one() == 1
        assert capability.successor(10) == 11
        assert capability.predecessor(10) == 9
        assert capability.to_count(10) == 10

    def test_shortcuts(self):
        capability = capability_for(3)
        assert capability.add(3, 4) == 7
        assert capability.multiply(3, 4) == 12
        assert capability.power(3, 4) == 81

    def test_capability_cached_per_type(self):
        assert capability_for(3) is capability_for(5)
        assert capability_for(3) is not capability_for(Fraction(3))

    def test_decimal_to_count(self):
        capability = capability_for(Decimal(1))
        assert capability.to_count(Decimal("4")) == 4

        with pytest.raises(NumericCapabilityError, match="non-integral"):
            capability.to_count(Decimal("4.5"))

    def test_float_to_count(self):
        capability = capability_for(2.0)
        assert capability.to_count(4.0) == 4

        with pytest.raises(NumericCapabilityError):
            capability.to_count(float("inf"))

        with pytest.raises(NumericCapabilityError):
            capability.to_count(float("nan"))

    def test_wrapping_type_keeps_its_overflow(self):
        """3 ↑↑ 3 в U8 — это 3^27 по модулю 256."""
        result = evaluate(U8(3), 4, 3)
        assert isinstance(result, U8)
        assert result == 7625597484987 % 256

    def test_wrapping_type_pure_matches_native(self):
        native = evaluate(U8(7), 3, 3)
        pure = evaluate(U8(7), 3, 3, config=EvaluationConfig(use_native_shortcuts=False))
        assert native == pure == (7 ** 3) % 256

    def test_repr(self):
        assert repr(capability_for(3)) == "NativeCapability(int)"


# =============================================================================
# ТЕСТЫ: count больше максимума fixed-width типа
# =============================================================================


class TestCountBeyondFixedWidth:
    """Shortcuts не конвертируют count в T, если T его не вмещает."""

    def test_count_does_not_fit(self):
        with pytest.raises(OverflowError):
            Checked8(300)

    def test_addition_matches_successor_chain(self):
        native = evaluate(Checked8(1), 1, 300)
        pure = evaluate(Checked8(1), 1, 300, config=PURE)
        assert native == pure == (1 + 300) % 256
        assert isinstance(native, Checked8)

    def test_multiplication_matches_successor_chain(self):
        native = hyperoperation(Checked8(2), 300, 0)
        pure = hyperoperation(Checked8(2), 300, 0, config=PURE)
        assert native == pure == (2 * 300) % 256
        assert isinstance(native, Checked8)

    def test_power_wraps_in_type(self):
        result = evaluate(Checked8(3), 3, 300)
        assert result == pow(3, 300, 256)
        assert isinstance(result, Checked8)

    def test_multiplication_by_multiple_of_width(self):
        assert hyperoperation(Checked8(5), 512, 0) == 0

    def test_numpy_uint8(self):
        np = pytest.importorskip("numpy")

        with np.errstate(over="ignore"):
            assert hyperoperation(np.uint8(2), 300, 0) == hyperoperation(
                np.uint8(2), 300, 0, config=PURE
            ) == 88
            assert evaluate(np.uint8(1), 1, 300) == evaluate(np.uint8(1), 1, 300, config=PURE) == 45


# =============================================================================
# ТЕСТЫ: Неподходящие типы
# =============================================================================


class TestUnsupportedTypes:
    """capability_for отвергает неподходящие типы."""

    def test_bool_rejected(self):
        with pytest.raises(NumericCapabilityError, match="bool"):
            capability_for(True)

    def test_str_rejected(self):
        with pytest.raises(NumericCapabilityError, match="__sub__"):
            capability_for("3")

    def test_none_rejected(self):
        with pytest.raises(NumericCapabilityError):
            capability_for(None)

    def test_not_constructible_from_int(self):
        class Vector:
            def __init__(self, x, y):
                self.x, self.y = x, y

            def __add__(self, other):
                return Vector(self.x + other.x, self.y + other.y)

            __sub__ = __mul__ = __pow__ = __add__

        with pytest.raises(NumericCapabilityError, match="constructed from int"):
            capability_for(Vector(1, 2))

    def test_error_is_type_error(self):
        with pytest.raises(TypeError):
            capability_for(None)

    def test_native_capability_direct(self):
        assert isinstance(NativeCapability(Fraction), NumericCapability)
