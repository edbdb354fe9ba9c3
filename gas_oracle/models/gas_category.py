from enum import Enum


class GasCategory(Enum):
    """Urgency tier used to pick an estimate out of a provider's response."""

    SAFE_LOW = 'safe_low'
    STANDARD = 'standard'
    FAST = 'fast'
    FASTEST = 'fastest'

    @property
    def confidence(self) -> int:
        return gas_category_to_confidence(self)


CATEGORY_CONFIDENCE = {
    GasCategory.SAFE_LOW: 80,
    GasCategory.STANDARD: 90,
    GasCategory.FAST: 95,
    GasCategory.FASTEST: 99,
}


def gas_category_to_confidence(gas_category: GasCategory) -> int:
    return CATEGORY_CONFIDENCE[gas_category]
