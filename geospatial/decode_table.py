import threading

from geospatial import config
from geospatial.logger import setup_logger

logger = setup_logger(__name__)


class DecodeTable:
    """Byte value -> 5-bit code lookup, built once on first use.

    Unknown bytes map to ``config.INVALID_CODE``. The build is guarded so that
    concurrent first lookups all see the same fully populated table.
    """

    def __init__(self, alphabet: str = config.BASE32):
        self.alphabet = alphabet
        self._table = None
        self._lock = threading.Lock()

    @property
    def built(self) -> bool:
        return self._table is not None

    def build(self) -> bytes:
        # Fast path - already built
        table = self._table
        if table is not None:
            return table

        with self._lock:
            # Double-check after acquiring lock
            if self._table is None:
                table = bytearray([config.INVALID_CODE]) * 256
                for code, char in enumerate(self.alphabet):
                    table[ord(char)] = code
                self._table = bytes(table)
                logger.debug(f"Built decode table for {len(self.alphabet)} symbols")
            return self._table

    def lookup(self, char: str) -> int:
        """Return the 5-bit code for char, or ``config.INVALID_CODE``."""
        table = self.build()
        code = ord(char)
        if code >= len(table):
            return config.INVALID_CODE
        return table[code]


_default_table = DecodeTable()


def default_table() -> DecodeTable:
    return _default_table
