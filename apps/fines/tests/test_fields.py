from decimal import Decimal

from apps.fines.fields import AmountField, decimal_to_number


class TestDecimalToNumber:

    def test_converts_to_float(self):
        assert decimal_to_number(Decimal('5.50')) == 5.5
        assert isinstance(decimal_to_number(Decimal('5.50')), float)

    def test_rounds_half_up_to_cents(self):
        assert decimal_to_number(Decimal('2.345')) == 2.35
        assert decimal_to_number(Decimal('2.344')) == 2.34

    def test_none_passthrough(self):
        assert decimal_to_number(None) is None

    def test_amount_field_representation(self):
        assert AmountField().to_representation(Decimal('12.00')) == 12.0
