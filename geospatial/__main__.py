import sys

from geospatial.exceptions import GeohashError
from geospatial.geohash import decode, encode_with_len
from geospatial.logger import setup_logger
from geospatial.vectors import KNOWN_VECTORS

logger = setup_logger("geospatial.selfcheck")


class TapReporter:
    """Minimal Test Anything Protocol writer."""

    def __init__(self, out=None):
        self.out = out if out is not None else sys.stdout
        self.count = 0
        self.failed = 0

    def plan(self, count: int):
        print(f"1..{count}", file=self.out)

    def ok(self, passed: bool, msg: str):
        self.count += 1
        if not passed:
            self.failed += 1
        print(f"{'' if passed else 'not '}ok {self.count} {msg}", file=self.out)


def run(vectors=KNOWN_VECTORS, out=None) -> int:
    tap = TapReporter(out)
    tap.plan(len(vectors) * 4)

    for expected, lat, lon, eps in vectors:
        computed = encode_with_len(lat, lon, len(expected))
        tap.ok(computed == expected, "encode_with_len")
        try:
            dlat, dlon = decode(computed)
        except GeohashError as e:
            logger.error(f"Failed to decode {computed!r}: {e}")
            tap.ok(False, "decode")
            tap.ok(False, "lat")
            tap.ok(False, "lon")
            continue
        tap.ok(True, "decode")
        tap.ok(abs(dlat - lat) < eps, "lat")
        tap.ok(abs(dlon - lon) < eps, "lon")

    if tap.failed:
        logger.error(f"{tap.failed} of {tap.count} checks failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
