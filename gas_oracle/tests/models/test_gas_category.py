import pytest

from gas_oracle.models.gas_category import GasCategory, gas_category_to_confidence


@pytest.mark.parametrize(
    'gas_category, confidence',
    [
        (GasCategory.SAFE_LOW, 80),
        (GasCategory.STANDARD, 90),
        (GasCategory.FAST, 95),
        (GasCategory.FASTEST, 99),
    ],
)
def test_gas_category_to_confidence(gas_category, confidence):
    assert gas_category_to_confidence(gas_category) == confidence
    assert gas_category.confidence == confidence


def test_every_category_has_confidence():
    assert {category.confidence for category in GasCategory} == {80, 90, 95, 99}
