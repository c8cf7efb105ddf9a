"""Fixed unit ratios and instant range bounds used throughout cronos.

Year and month lengths are based on the mean Gregorian year of 365.2425 days
and do not depend on where leap years fall. Derived values are computed in a
fixed order (seconds per year truncated first, then divided by 12 for a month)
so every conversion agrees to the millisecond.
"""

import math
from fractions import Fraction

DAYS_IN_WEEK = 7

# 1 mean year = (365 + 1/4 - 1/100 + 1/400) days
DAYS_IN_YEAR = Fraction("365.2425")

# Largest instant (in ms from the Unix epoch) a date may name, ~285,616 years
MAX_TIME = 8_640_000_000_000_000
MIN_TIME = -MAX_TIME

MINUTES_IN_YEAR = 525_600
MINUTES_IN_MONTH = 43_200
MINUTES_IN_DAY = 1_440
MINUTES_IN_HOUR = 60

MONTHS_IN_QUARTER = 3
MONTHS_IN_YEAR = 12
QUARTERS_IN_YEAR = 4

SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = 3_600
SECONDS_IN_DAY = SECONDS_IN_HOUR * 24
SECONDS_IN_WEEK = SECONDS_IN_DAY * DAYS_IN_WEEK
SECONDS_IN_YEAR = math.floor(SECONDS_IN_DAY * DAYS_IN_YEAR)
SECONDS_IN_MONTH = SECONDS_IN_YEAR // MONTHS_IN_YEAR
SECONDS_IN_QUARTER = SECONDS_IN_MONTH * MONTHS_IN_QUARTER

MILLISECONDS_IN_SECOND = 1_000
MILLISECONDS_IN_MINUTE = 60_000
MILLISECONDS_IN_HOUR = 3_600_000
MILLISECONDS_IN_DAY = 86_400_000
MILLISECONDS_IN_WEEK = 604_800_000
MILLISECONDS_IN_MONTH = SECONDS_IN_MONTH * MILLISECONDS_IN_SECOND
MILLISECONDS_IN_YEAR = SECONDS_IN_YEAR * MILLISECONDS_IN_SECOND
