"""
Tests for the operation catalogue.
"""

import math

import pytest

from backend.objexpr.logic.operations import OPERATIONS, Arity


class TestArity:
    """Tests for the Arity representation."""

    def test_fixed_accepts_only_its_count(self):
        """Test that a fixed arity accepts exactly one count."""
        arity = Arity.fixed(2)
        assert arity.accepts(2)
        assert not arity.accepts(1)
        assert not arity.accepts(3)
        assert not arity.is_variadic

    def test_variadic_accepts_any_count(self):
        """Test that a variadic arity has no bounds."""
        arity = Arity.variadic()
        assert arity.is_variadic
        assert arity.accepts(0)
        assert arity.accepts(1)
        assert arity.accepts(100)

    def test_negative_fixed_rejected(self):
        """Test that a negative fixed arity is invalid."""
        with pytest.raises(ValueError):
            Arity.fixed(-1)

    def test_str(self):
        assert str(Arity.fixed(3)) == "3"
        assert str(Arity.variadic()) == "variadic"


class TestCatalogue:
    """Tests for the OPERATIONS table."""

    def test_symbols(self):
        """Test the catalogue holds exactly the known operators."""
        assert set(OPERATIONS) == {
            "+", "-", "*", "/", "negate", "med3", "avg5",
            "arith-mean", "geom-mean", "harm-mean",
        }

    def test_arities(self):
        """Test declared arities."""
        assert OPERATIONS["+"].arity == Arity.fixed(2)
        assert OPERATIONS["negate"].arity == Arity.fixed(1)
        assert OPERATIONS["med3"].arity == Arity.fixed(3)
        assert OPERATIONS["avg5"].arity == Arity.fixed(5)
        for symbol in ("arith-mean", "geom-mean", "harm-mean"):
            assert OPERATIONS[symbol].arity.is_variadic

    def test_catalogue_is_read_only(self):
        """Test that the table cannot be extended at runtime."""
        with pytest.raises(TypeError):
            OPERATIONS["^"] = OPERATIONS["*"]

    def test_binary_rules(self):
        assert OPERATIONS["+"].apply(2, 3) == 5
        assert OPERATIONS["-"].apply(2, 3) == -1
        assert OPERATIONS["*"].apply(2, 3) == 6
        assert OPERATIONS["/"].apply(3, 2) == 1.5

    def test_negate(self):
        assert OPERATIONS["negate"].apply(4) == -4

    def test_med3(self):
        """Test median of three picks the middle value."""
        assert OPERATIONS["med3"].apply(5, 1, 3) == 3
        assert OPERATIONS["med3"].apply(1, 1, 3) == 1

    def test_avg5(self):
        assert OPERATIONS["avg5"].apply(1, 2, 3, 4, 5) == 3

    def test_means(self):
        """Test the variadic means."""
        assert OPERATIONS["arith-mean"].apply(1, 2, 3) == 2
        assert OPERATIONS["geom-mean"].apply(1, 2) == pytest.approx(math.sqrt(2))
        assert OPERATIONS["geom-mean"].apply(-2, -8) == pytest.approx(4)
        assert OPERATIONS["harm-mean"].apply(1, 1) == 1
        assert OPERATIONS["harm-mean"].apply(1, 3) == pytest.approx(1.5)


class TestFloatingPointEdgeCases:
    """Tests that numeric edge cases produce IEEE-754 values instead of errors."""

    def test_division_by_zero(self):
        """Test x/0 is a signed infinity and 0/0 is NaN."""
        assert OPERATIONS["/"].apply(1.0, 0.0) == math.inf
        assert OPERATIONS["/"].apply(-1.0, 0.0) == -math.inf
        assert OPERATIONS["/"].apply(1.0, -0.0) == -math.inf
        assert math.isnan(OPERATIONS["/"].apply(0.0, 0.0))

    def test_empty_arith_mean_is_nan(self):
        assert math.isnan(OPERATIONS["arith-mean"].apply())

    def test_empty_harm_mean_is_nan(self):
        assert math.isnan(OPERATIONS["harm-mean"].apply())

    def test_empty_geom_mean_is_nan(self):
        assert math.isnan(OPERATIONS["geom-mean"].apply())

    def test_harm_mean_with_zero(self):
        """Test a zero operand drives the harmonic mean to zero."""
        assert OPERATIONS["harm-mean"].apply(1.0, 0.0) == 0.0
