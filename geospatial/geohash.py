from typing import NamedTuple, Optional

from geospatial import config
from geospatial.bisector import IntervalBisector
from geospatial.decode_table import default_table
from geospatial.exceptions import InvalidCharacterError
from geospatial.logger import setup_logger
from geospatial.precision import precision

logger = setup_logger(__name__)


class Bounds(NamedTuple):
    lat_lo: float
    lon_lo: float
    lat_hi: float
    lon_hi: float

    def midpoint(self) -> tuple[float, float]:
        return (self.lat_lo + self.lat_hi) / 2, (self.lon_lo + self.lon_hi) / 2


def encode_with_len(lat: float, lon: float, length: int) -> str:
    """Encode a latitude and longitude into a geohash of exactly length characters.

    Coordinates are not validated; values outside the axis ranges give a
    hash pinned to the nearest edge.
    """
    bisector = IntervalBisector()
    return "".join(
        config.BASE32[bisector.encode_char(lat, lon)] for _ in range(length)
    )


def encode(lat: float, lon: float, max_length: int = config.DEFAULT_LENGTH) -> str:
    """Encode, capping the length at what the coordinates' precision justifies."""
    length = precision(lat, lon)
    if max_length > length:
        logger.debug(f"Capping geohash length for ({lat}, {lon}) from {max_length} to {length}")
    else:
        length = max_length
    return encode_with_len(lat, lon, length)


def decode_to_interval(geohash: str) -> Bounds:
    """Decode a geohash into the bounds of its cell.

    Raises:
        InvalidCharacterError: if any character is outside the base32 alphabet
    """
    table = default_table()
    bisector = IntervalBisector()
    for position, char in enumerate(geohash):
        bits = table.lookup(char)
        if bits == config.INVALID_CODE:
            raise InvalidCharacterError(geohash, position)
        bisector.decode_char(bits)

    (lat_lo, lat_hi), (lon_lo, lon_hi) = bisector.intervals
    return Bounds(lat_lo, lon_lo, lat_hi, lon_hi)


def decode(geohash: str) -> tuple[float, float]:
    """Decode a geohash into the (lat, lon) centre of its cell."""
    return decode_to_interval(geohash).midpoint()


def cell_size(length: int) -> tuple[float, float]:
    """Calculate the size of a geohash cell for a given length.

    Args:
        length (int): number of characters in the geohash

    Returns:
        (latitude_height, longitude_width) in degrees
    """
    bit_length = length * config.BITS_PER_CHAR
    # Longitude takes the first bit, so it gets the extra one on odd counts
    lat_bits = bit_length // 2
    lon_bits = bit_length - lat_bits

    lat_lo, lat_hi = config.LAT_RANGE
    lon_lo, lon_hi = config.LON_RANGE
    return (lat_hi - lat_lo) / (1 << lat_bits), (lon_hi - lon_lo) / (1 << lon_bits)


def neighbors(geohash: str) -> dict[str, str]:
    """
    Compute the 8 neighboring geohashes (N, S, E, W, NE, NW, SE, SW).
    """
    center_lat, center_lon = decode(geohash)
    lat_height, lon_width = cell_size(len(geohash))
    directions = {
        "n": (1, 0),
        "s": (-1, 0),
        "e": (0, 1),
        "w": (0, -1),
        "ne": (1, 1),
        "se": (-1, 1),
        "nw": (1, -1),
        "sw": (-1, -1),
    }
    lat_min, lat_max = config.LAT_RANGE
    lon_min, lon_max = config.LON_RANGE

    result = {}
    for direction, (dlat, dlon) in directions.items():
        nlat = min(max(center_lat + dlat * lat_height, lat_min), lat_max)

        nlon = center_lon + dlon * lon_width
        if nlon > lon_max:
            nlon -= lon_max - lon_min
        elif nlon < lon_min:
            nlon += lon_max - lon_min

        result[direction] = encode_with_len(nlat, nlon, len(geohash))
    return result


class Geohash:
    BASE32 = config.BASE32

    def __init__(self, max_length: int = config.DEFAULT_LENGTH):
        """Initialize Geohash encoder/decoder with given maximum length."""
        if not 1 <= max_length <= config.MAX_LENGTH:
            raise ValueError(f"Length must be between 1 and {config.MAX_LENGTH}")
        self.max_length = max_length

    def encode(self, lat: float, lon: float) -> str:
        """Encode a latitude and longitude into a precision-capped geohash."""
        return encode(lat, lon, self.max_length)

    def encode_with_len(self, lat: float, lon: float, length: Optional[int] = None) -> str:
        return encode_with_len(lat, lon, self.max_length if length is None else length)

    def precision(self, lat: float, lon: float) -> int:
        return min(precision(lat, lon), self.max_length)

    def decode(self, geohash: str) -> tuple[float, float]:
        """Decode a geohash into a latitude and longitude."""
        return decode(geohash)

    def decode_to_interval(self, geohash: str) -> Bounds:
        return decode_to_interval(geohash)

    def cell_size(self, length: Optional[int] = None) -> tuple[float, float]:
        return cell_size(self.max_length if length is None else length)

    def get_neighbors(self, geohash: str) -> dict[str, str]:
        return neighbors(geohash)


if __name__ == "__main__":
    geo = Geohash(max_length=6)
    encoded = geo.encode(41.878738, -87.6359612)  # Willis Tower
    decoded = geo.decode(encoded)
    bounds = geo.decode_to_interval(encoded)
    adjacent = geo.get_neighbors(encoded)

    print(f"Encoded: {encoded}")
    print(f"Decoded: {decoded}")
    print(f"Bounds: {bounds}")
    print(f"Neighbors: {adjacent}")
