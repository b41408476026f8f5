"""Input validation and input matrix tests."""

import pytest
from pydantic import ValidationError

from covergen.core.validation import check_dimension, parse_input
from covergen.errors import InputValidationError
from covergen.models import DeviceDimensions, InputErrorKind, InputMatrix, UNSPECIFIED


def _kind(value, limit=2000):
    with pytest.raises(InputValidationError) as exc:
        check_dimension(value, limit)
    return exc.value.kind


class TestCheckDimension:
    """Single field validation"""

    def test_whole_number(self):
        assert check_dimension("950") == 950
        assert check_dimension(" 12 ") == 12
        assert check_dimension(0) == 0

    def test_empty_is_unspecified(self):
        assert check_dimension("") is None
        assert check_dimension("   ") is None
        assert check_dimension(None) is None

    def test_not_a_number(self):
        assert _kind("abc") == InputErrorKind.WRONG_FORMAT
        assert _kind("12.5") == InputErrorKind.WRONG_FORMAT
        assert _kind(True) == InputErrorKind.WRONG_FORMAT

    def test_negative(self):
        assert _kind("-5") == InputErrorKind.WRONG_VALUE
        assert _kind(-1) == InputErrorKind.WRONG_VALUE

    def test_limit_is_exclusive(self):
        assert check_dimension("1999") == 1999
        assert _kind("2000") == InputErrorKind.TOO_HIGH_VALUE
        assert _kind(600, limit=500) == InputErrorKind.TOO_HIGH_VALUE


class TestParseInput:
    """Raw groups to InputMatrix"""

    def test_full_input(self):
        matrix = parse_input(["950", "500", "800"], ["100", "", "80"], ["", "20", "", "30"])

        assert matrix.device == DeviceDimensions(length=950, width=500, height=800)
        assert matrix.obstacles.left == 100
        assert matrix.obstacles.right is None
        assert matrix.spacings.front == 20
        assert matrix.spacings.side is None

    def test_optional_groups_default(self):
        matrix = parse_input([950, 500, 800])
        assert matrix.obstacles.back is None
        assert not matrix.spacings.is_resolved

    def test_device_required(self):
        with pytest.raises(InputValidationError) as exc:
            parse_input(["950", "", "800"])
        assert exc.value.kind == InputErrorKind.WRONG_FORMAT
        assert exc.value.field == "device.width"

    def test_field_named_in_error(self):
        with pytest.raises(InputValidationError) as exc:
            parse_input(["950", "500", "800"], spacings=["", "", "-3", ""])
        assert exc.value.kind == InputErrorKind.WRONG_VALUE
        assert exc.value.field == "spacings.back"

    def test_wrong_group_size(self):
        with pytest.raises(ValueError):
            parse_input(["950", "500"])


class TestInputMatrix:
    """Model-level checks"""

    def test_from_rows_sentinel(self):
        matrix = InputMatrix.from_rows([[950, 500, 800], [UNSPECIFIED, 40, -1], [-1, 10, -1, -1]])
        assert matrix.obstacles.left is None
        assert matrix.obstacles.right == 40
        assert matrix.spacings.front == 10
        assert matrix.spacings.top is None

    def test_to_rows(self):
        rows = [[950, 500, 800], [-1, 40, -1], [-1, 10, -1, -1]]
        assert InputMatrix.from_rows(rows).to_rows() == rows

    def test_from_rows_shape(self):
        with pytest.raises(ValueError):
            InputMatrix.from_rows([[950, 500, 800], [-1, -1, -1]])

    def test_negative_device_rejected(self):
        with pytest.raises(ValidationError):
            DeviceDimensions(length=-1, width=500, height=800)

    def test_negative_distance_rejected(self):
        with pytest.raises(ValidationError):
            InputMatrix.from_rows([[950, 500, 800], [-2, -1, -1], [-1, -1, -1, -1]])
