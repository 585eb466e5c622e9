import math

import pytest

from garment_flow.errors import ValidationError
from garment_flow.utils.validators import (require_fields, require_id, require_integer,
                                           require_number, require_string, sanitize_string,
                                           validate_email)


class TestRequireNumber:
    def test_accepts_numbers_and_numeric_strings(self):
        assert require_number(5, 'Weight') == 5.0
        assert require_number('12.5', 'Weight') == 12.5
        assert require_number(0, 'Weight') == 0.0

    @pytest.mark.parametrize('value', [None, '', '   '])
    def test_missing_value_is_required(self, value):
        with pytest.raises(ValidationError, match='Weight is required'):
            require_number(value, 'Weight')

    @pytest.mark.parametrize('value', ['abc', True, math.nan, math.inf, [1]])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValidationError, match='Weight must be a valid number'):
            require_number(value, 'Weight')

    def test_huge_integer_is_not_a_number(self):
        with pytest.raises(ValidationError, match='Weight must be a valid number'):
            require_number(10 ** 400, 'Weight')

    def test_rejects_negative(self):
        with pytest.raises(ValidationError) as exc:
            require_number(-0.1, 'Weight')
        assert exc.value.message == 'Weight cannot be negative'
        assert exc.value.field == 'Weight'
        assert exc.value.status_code == 400


class TestRequireInteger:
    def test_whole_numbers_become_ints(self):
        assert require_integer(4.0, 'Rolls') == 4
        assert isinstance(require_integer('7', 'Rolls'), int)

    def test_rejects_fractions(self):
        with pytest.raises(ValidationError, match='Rolls must be a whole number'):
            require_integer(2.5, 'Rolls')

    def test_negative_reported_before_fraction(self):
        with pytest.raises(ValidationError, match='cannot be negative'):
            require_integer(-2.5, 'Rolls')

    def test_rejects_values_past_integer_range(self):
        with pytest.raises(ValidationError, match='Pieces is too large'):
            require_integer(1e19, 'Pieces')


class TestRequireString:
    def test_strips_whitespace(self):
        assert require_string('  Blue ', 'Color') == 'Blue'

    def test_none_is_required(self):
        with pytest.raises(ValidationError, match='Color is required'):
            require_string(None, 'Color')

    def test_blank_is_empty(self):
        with pytest.raises(ValidationError, match='Color cannot be empty'):
            require_string('   ', 'Color')

    def test_min_length(self):
        with pytest.raises(ValidationError, match='Code must be at least 3 characters'):
            require_string('ab', 'Code', min_length=3)


def test_require_fields_names_first_missing_field():
    with pytest.raises(ValidationError, match='Missing required field: color'):
        require_fields({'batchCode': 'YRN-1', 'color': None}, ('batchCode', 'color', 'weightKg'))
    assert require_fields({'a': 0}, ('a',)) is True


def test_require_fields_rejects_non_objects():
    with pytest.raises(ValidationError, match='must be an object'):
        require_fields(['a'], ('a',))


@pytest.mark.parametrize('value', [0, -1, 1.5, '3', True, None])
def test_require_id_rejects_non_positive_ints(value):
    with pytest.raises(ValidationError, match='positive number'):
        require_id(value)


def test_require_id_rejects_ids_past_integer_range():
    with pytest.raises(ValidationError, match='too large'):
        require_id(2 ** 63)


def test_sanitize_and_email():
    assert sanitize_string(' <b>Blue</b> ') == 'Blue'
    assert validate_email('ops@factory.example') is None
    assert validate_email('not-an-email') == 'Invalid email format'
