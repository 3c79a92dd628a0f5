"""Test validated construction and conversion of probability levels."""

import math
from fractions import Fraction

import numpy as np
import pytest

from confi import ConfidenceLevel, SignificanceLevel, ValidationError

FRACTIONS = [0.0, 0.001, 0.05, 0.1, 0.33, 0.5, 0.9, 0.975, 1.0]


class TestConstruction:
    """Check the [0, 1] invariant on every construction path."""

    @pytest.mark.parametrize("cls", [ConfidenceLevel, SignificanceLevel])
    @pytest.mark.parametrize("x", FRACTIONS)
    def test_fractional_matches_percentage(self, cls, x):
        from_fraction = cls.fractional(x).probability()
        from_percentage = cls.percentage(100.0 * x).probability()
        assert math.isclose(from_fraction, from_percentage, abs_tol=1e-12)

    def test_exact_equality_for_conventional_values(self):
        assert SignificanceLevel.fractional(0.1) == SignificanceLevel.percentage(10.0)
        assert ConfidenceLevel.fractional(0.1) == ConfidenceLevel.percentage(10.0)

    @pytest.mark.parametrize("cls", [ConfidenceLevel, SignificanceLevel])
    @pytest.mark.parametrize("bad", [-0.1, 1.1, math.nan, math.inf, -math.inf])
    def test_fractional_rejects_out_of_range(self, cls, bad):
        with pytest.raises(ValidationError):
            cls.fractional(bad)

    @pytest.mark.parametrize("bad", [-1.0, 100.5, math.nan])
    def test_percentage_rejects_out_of_range(self, bad):
        with pytest.raises(ValidationError):
            ConfidenceLevel.percentage(bad)

    def test_percentage_error_carries_divided_value(self):
        with pytest.raises(ValidationError) as excinfo:
            SignificanceLevel.percentage(150.0)
        assert math.isclose(excinfo.value.value, 1.5)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError, match="between 0 and 1"):
            ConfidenceLevel.fractional(2.0)

    def test_direct_construction_is_validated(self):
        with pytest.raises(ValidationError):
            ConfidenceLevel(-0.5)

    def test_non_numeric_raises_type_error(self):
        with pytest.raises(TypeError, match="must be numeric"):
            ConfidenceLevel.fractional("0.5")  # type: ignore

    def test_bool_is_rejected(self):
        with pytest.raises(TypeError, match="must be numeric"):
            ConfidenceLevel.fractional(True)  # type: ignore

    def test_fraction_is_stored_as_float(self):
        level = SignificanceLevel.fractional(Fraction(1, 4))
        assert type(level.probability()) is float
        assert level.probability() == 0.25

    def test_integer_is_stored_as_float(self):
        assert type(ConfidenceLevel.fractional(1).probability()) is float

    def test_levels_are_immutable(self):
        level = ConfidenceLevel.ninety_five_percent()
        with pytest.raises(AttributeError):
            level.fraction = 0.5  # type: ignore


class TestNamedLevels:
    """Conventional levels are exact complements of each other."""

    @pytest.mark.parametrize(
        "confidence, significance, expected",
        [
            ("ninety_percent", "ten_percent", 0.9),
            ("ninety_five_percent", "five_percent", 0.95),
            ("ninety_seven_point_five_percent", "two_point_five_percent", 0.975),
            ("ninety_nine_percent", "one_percent", 0.99),
            ("ninety_nine_point_five_percent", "zero_point_five_percent", 0.995),
            ("ninety_nine_point_nine_percent", "zero_point_one_percent", 0.999),
        ],
    )
    def test_named_pairs_are_complementary(self, confidence, significance, expected):
        c = getattr(ConfidenceLevel, confidence)()
        s = getattr(SignificanceLevel, significance)()
        assert c.probability() == expected
        assert math.isclose(c.probability() + s.probability(), 1.0, abs_tol=1e-12)
        assert math.isclose(
            c.to_significance().probability(), s.probability(), abs_tol=1e-12
        )

    def test_named_level_respects_dtype(self):
        level = SignificanceLevel.five_percent(dtype=np.float32)
        assert isinstance(level.probability(), np.float32)


class TestConversion:
    """Confidence and significance convert losslessly."""

    @pytest.mark.parametrize("p", FRACTIONS)
    def test_round_trip(self, p):
        level = ConfidenceLevel.fractional(p)
        significance = SignificanceLevel.from_confidence(level)
        back = ConfidenceLevel.from_significance(significance)
        assert math.isclose(back.probability(), p, abs_tol=1e-9)
        assert math.isclose(significance.probability(), 1.0 - p, abs_tol=1e-12)

    def test_instance_shorthands(self):
        significance = SignificanceLevel.fractional(0.2)
        assert math.isclose(significance.to_confidence().probability(), 0.8)
        assert math.isclose(
            significance.to_confidence().to_significance().probability(), 0.2
        )

    def test_single_precision_is_preserved(self):
        level = ConfidenceLevel.fractional(np.float32(0.95))
        significance = level.to_significance()
        assert isinstance(significance.probability(), np.float32)
        assert isinstance(significance.num_standard_deviations(), np.float32)

    def test_astype_converts_storage(self):
        level = ConfidenceLevel.fractional(np.float32(0.5))
        widened = level.astype(float)
        assert type(widened.probability()) is float
        assert widened.probability() == 0.5


class TestStandardDeviations:
    """The significance level maps onto a one-sided normal threshold."""

    def test_five_percent(self):
        z = SignificanceLevel.five_percent().num_standard_deviations()
        assert math.isclose(z, 1.6448536269514722, rel_tol=1e-9)

    def test_ten_percent(self):
        z = SignificanceLevel.ten_percent().num_standard_deviations()
        assert math.isclose(z, 1.2815515655446004, rel_tol=1e-9)

    def test_zero_fraction_significance_is_unbounded(self):
        z = SignificanceLevel.fractional(Fraction(0)).num_standard_deviations()
        assert type(z) is float
        assert math.isinf(z) and z > 0

    def test_half_is_distribution_centre(self):
        assert SignificanceLevel.fractional(0.5).num_standard_deviations() == 0.0

    def test_zero_significance_is_unbounded(self):
        z = SignificanceLevel.fractional(0.0).num_standard_deviations()
        assert math.isinf(z) and z > 0


class TestDisplay:
    def test_confidence_display(self):
        assert str(ConfidenceLevel.ninety_five_percent()) == "Confidence Level: 95.000%"

    def test_significance_display(self):
        text = str(SignificanceLevel.zero_point_one_percent())
        assert text == "Significance Level: 0.100%"
