class GeohashError(ValueError):
    """Base class for geohash codec errors"""


class InvalidCharacterError(GeohashError):
    """Raised when a geohash contains a character outside the base32 alphabet."""

    def __init__(self, geohash: str, position: int):
        self.geohash = geohash
        self.position = position
        self.character = geohash[position]
        super().__init__(
            f"Invalid character {self.character!r} at position {position} in geohash {geohash!r}"
        )
