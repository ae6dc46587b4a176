import os

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"  # Standard Base32 characters

BITS_PER_CHAR = 5
MAX_LENGTH = 12  # 12 is standard max precision
DEFAULT_LENGTH = MAX_LENGTH

# Axis indices, also the order of the bisector's intervals
LATITUDE = 0
LONGITUDE = 1

LAT_RANGE = (-90.0, 90.0)
LON_RANGE = (-180.0, 180.0)

# Bits needed for the integer degree part of each axis (90 -> 8, 180 -> 9)
LAT_INTEGER_BITS = 8
LON_INTEGER_BITS = 9

LOG2_10 = 3.32192809488736
FRACTIONAL_DIGITS = 8

INVALID_CODE = 0xFF

LOG_LEVEL = os.environ.get("GEOSPATIAL_LOG_LEVEL", "INFO").upper()
