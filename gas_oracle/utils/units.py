from decimal import ROUND_DOWN, Decimal

GWEI_TO_WEI = 10 ** 9

# BlockNative's composite `price` is reported in tenths of a gwei.
# TODO: confirm the /10 scaling against BlockNative's published units.
BLOCKNATIVE_PRICE_SCALE = 10


def gwei_to_wei(value: float, decimals: int = 2) -> int:
    """
    Convert a float gwei amount into integer wei, keeping `decimals` fractional
    digits and truncating the rest: truncate(value * 10**decimals) * 10**9 / 10**decimals.

    Arithmetic runs on the shortest decimal representation of the float, so
    12.34 gwei is exactly 12340000000 wei, while `int(12.34 * 1e9)` is not.
    """
    scale = 10 ** decimals
    scaled = (Decimal(repr(value)) * scale).to_integral_value(rounding=ROUND_DOWN)
    return int(scaled) * GWEI_TO_WEI // scale


def blocknative_price_to_wei(price: int) -> int:
    return price * GWEI_TO_WEI // BLOCKNATIVE_PRICE_SCALE
