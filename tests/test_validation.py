"""Tests for input validation module."""

import math

import pytest

from nbody_track.validation import (
    BodyNotFoundError,
    InvalidBodyError,
    InvalidStepError,
    InvalidThetaError,
    InvalidUniverseSizeError,
    UniverseFormatError,
    ValidationError,
    validate_mass,
    validate_steps,
    validate_theta,
    validate_universe_size,
)


class TestMassValidation:
    """Tests for mass validation."""

    def test_valid_mass(self):
        """Positive masses are returned as floats."""
        assert validate_mass(5) == 5.0
        assert isinstance(validate_mass(5), float)
        assert validate_mass("1.5e30") == 1.5e30

    @pytest.mark.parametrize("mass", [0, -1.0, math.inf, math.nan])
    def test_out_of_range_raises(self, mass):
        """Zero, negative and non-finite masses raise InvalidBodyError."""
        with pytest.raises(InvalidBodyError, match="positive and finite"):
            validate_mass(mass)

    def test_non_number_raises(self):
        """Non-numeric masses raise InvalidBodyError."""
        with pytest.raises(InvalidBodyError, match="must be a number"):
            validate_mass("heavy")


class TestUniverseSizeValidation:
    """Tests for universe size validation."""

    def test_valid_size(self):
        """Positive size is returned as float."""
        assert validate_universe_size(5e11) == 5e11
        assert validate_universe_size("100") == 100.0

    @pytest.mark.parametrize("size", [0, -10.0, math.inf])
    def test_invalid_size_raises(self, size):
        """Non-positive or infinite sizes raise InvalidUniverseSizeError."""
        with pytest.raises(InvalidUniverseSizeError, match="must be positive"):
            validate_universe_size(size)

    def test_none_raises(self):
        """None raises InvalidUniverseSizeError."""
        with pytest.raises(InvalidUniverseSizeError, match="must be a number"):
            validate_universe_size(None)


class TestStepValidation:
    """Tests for step parameter validation."""

    def test_valid_steps(self):
        """Valid values are returned unchanged."""
        assert validate_steps(100, 10) == (100, 10)

    def test_zero_total_allowed(self):
        """A zero-length run is valid."""
        assert validate_steps(0, 1) == (0, 1)

    def test_negative_total_raises(self):
        """Negative total raises InvalidStepError."""
        with pytest.raises(InvalidStepError, match="total_steps must be >= 0"):
            validate_steps(-1, 1)

    def test_zero_step_size_raises(self):
        """Zero step size raises InvalidStepError."""
        with pytest.raises(InvalidStepError, match="step_size must be > 0"):
            validate_steps(10, 0)

    @pytest.mark.parametrize("total,size", [(1.0, 1), (10, 0.5), (False, 1), (10, "1")])
    def test_non_integer_raises(self, total, size):
        """Floats, bools and strings raise InvalidStepError."""
        with pytest.raises(InvalidStepError, match="must be an integer"):
            validate_steps(total, size)


class TestThetaValidation:
    """Tests for Barnes-Hut theta validation."""

    def test_valid_theta(self):
        """Non-negative values are accepted."""
        assert validate_theta(0.5) == 0.5
        assert validate_theta(0) == 0.0
        assert validate_theta(2) == 2.0

    def test_negative_raises(self):
        """Negative theta raises InvalidThetaError."""
        with pytest.raises(InvalidThetaError, match=">= 0"):
            validate_theta(-0.5)

    def test_nan_raises(self):
        """NaN theta raises InvalidThetaError."""
        with pytest.raises(InvalidThetaError):
            validate_theta(math.nan)


class TestExceptionHierarchy:
    """Tests for the exception classes."""

    @pytest.mark.parametrize(
        "exc",
        [
            InvalidBodyError,
            InvalidUniverseSizeError,
            InvalidStepError,
            InvalidThetaError,
            UniverseFormatError,
            BodyNotFoundError,
        ],
    )
    def test_subclasses_validation_error(self, exc):
        """All errors derive from ValidationError and ValueError."""
        assert issubclass(exc, ValidationError)
        assert issubclass(exc, ValueError)

    def test_body_not_found(self):
        """BodyNotFoundError carries the name and is a LookupError."""
        error = BodyNotFoundError("Pluto")
        assert error.name == "Pluto"
        assert "Pluto" in str(error)
        assert isinstance(error, LookupError)
