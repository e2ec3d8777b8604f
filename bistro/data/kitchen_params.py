"""
Paramètres des statistiques cuisine.
"""

# A dish is "elaborate" when both thresholds are met
ELABORATE_MIN_INGREDIENTS = 5
ELABORATE_MIN_PREP_MINUTES = 60

# Release-all sentinels
RELEASE_ALL_PREP_TIME = 0
RELEASE_ALL_CUISINES = "ALL"

# Default name for dishes / stations with an invalid or missing name
UNKNOWN_NAME = "UNKNOWN"
