"""Golf constants shared by the scoring engine.

Values follow the World Handicap System (WHS) where a standard exists.
"""

import sys

# Round structure
HOLES_PER_ROUND = 18
FRONT_NINE_HOLES = 9

# Score markers
NOT_REPORTED = 0
GAVE_UP = -1

# WHS standard values
STANDARD_SLOPE_RATING = 113
STANDARD_COURSE_RATING = 72.0

# Valid ranges
MIN_PAR = 3
MAX_PAR = 6
MIN_COURSE_RATING = 50
MAX_COURSE_RATING = 90
MIN_SLOPE_RATING = 55
MAX_SLOPE_RATING = 155
MIN_HANDICAP_INDEX = -10
MAX_HANDICAP_INDEX = 54

# Par 4s and 5s carry the low (hard) indexes, par 3s the high ones
DEFAULT_STROKE_INDEX = (7, 15, 3, 11, 1, 9, 5, 17, 13, 8, 16, 4, 12, 2, 10, 6, 18, 14)

# Countback value for a team with fewer counted scores than its opponent
COUNTBACK_MISSING_SCORE = sys.maxsize

# Scoring modes
SCORING_MODES = ('gross', 'net', 'both')
