# src/pillengine/constants.py

# All doses are in MILLIGRAMS. Comparisons against a target use this tolerance.
FLOAT_TOLERANCE = 0.01

# Upper bound for any single day's dose (base or special).
ABSOLUTE_MAX_DAILY_DOSE = 15.0

# A special day may be at most this many times the base dose.
DOSE_MULTIPLIER_LIMIT = 2.5

MAX_PILLS_PER_DAY = 4
BASE_DOSE_STEP = 0.5

# Stop days + special days per week never exceed this.
MAX_STOP_AND_SPECIAL_DAYS = 3

MAX_RESULTS = 30
DAYS_PER_WEEK = 7

# Index 0 = Monday
DAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
