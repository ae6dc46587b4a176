from geospatial.exceptions import GeohashError, InvalidCharacterError
from geospatial.geohash import (
    Bounds,
    Geohash,
    cell_size,
    decode,
    decode_to_interval,
    encode,
    encode_with_len,
    neighbors,
)
from geospatial.precision import precision

__all__ = [
    "Bounds",
    "Geohash",
    "GeohashError",
    "InvalidCharacterError",
    "cell_size",
    "decode",
    "decode_to_interval",
    "encode",
    "encode_with_len",
    "neighbors",
    "precision",
]
