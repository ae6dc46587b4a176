from geospatial import config


class IntervalBisector:
    """Binary subdivision of the latitude and longitude ranges, one bit at a time.

    Axes alternate after every bit, starting with longitude. Each step keeps
    the half of the current axis interval selected by the bit: 1 keeps the
    upper half, 0 the lower half.
    """

    def __init__(self):
        self.intervals = [list(config.LAT_RANGE), list(config.LON_RANGE)]
        self.axis = config.LONGITUDE

    def midpoint(self, axis: int) -> float:
        lo, hi = self.intervals[axis]
        return (lo + hi) / 2

    def width(self, axis: int) -> float:
        lo, hi = self.intervals[axis]
        return hi - lo

    def encode_bit(self, value: float) -> int:
        """Emit the bit for value against the current axis and narrow toward it."""
        bit = 1 if value >= self.midpoint(self.axis) else 0
        self.decode_bit(bit)
        return bit

    def decode_bit(self, bit: int) -> None:
        """Narrow the current axis interval by a supplied bit."""
        interval = self.intervals[self.axis]
        mid = self.midpoint(self.axis)
        if bit:
            interval[0] = mid
        else:
            interval[1] = mid
        self.axis ^= 1

    def encode_char(self, lat: float, lon: float) -> int:
        """Run five bit steps, most significant bit first, and return the 5-bit value."""
        position = (lat, lon)
        bits = 0
        for _ in range(config.BITS_PER_CHAR):
            bits = (bits << 1) | self.encode_bit(position[self.axis])
        return bits

    def decode_char(self, bits: int) -> None:
        for shift in range(config.BITS_PER_CHAR - 1, -1, -1):
            self.decode_bit((bits >> shift) & 1)
