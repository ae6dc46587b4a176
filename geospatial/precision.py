from geospatial import config


def bits_for_number(n: float) -> int:
    """Bits implied by the fractional digits of n, rounded to 8 decimal places.

    Trailing zeros don't count. A value with no fractional point in its
    formatted form (nan, inf) contributes 0 bits.
    """
    text = format(n, f".{config.FRACTIONAL_DIGITS}f")
    dot = text.find(".")
    if dot < 0:
        return 0
    digits = len(text.rstrip("0")) - 1 - dot
    return int(digits * config.LOG2_10 + 1)


def precision(lat: float, lon: float) -> int:
    """Minimum hash length that preserves the apparent decimal precision of lat/lon."""
    lat_bits = bits_for_number(lat) + config.LAT_INTEGER_BITS
    lon_bits = bits_for_number(lon) + config.LON_INTEGER_BITS
    return int((max(lat_bits, lon_bits) + 1) / 2.5)
