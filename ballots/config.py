"""Validation thresholds for ballot creation."""

# Smallest number of answer options a ballot may offer
MIN_OPTIONS = 2

# Shortest voting window, in seconds
MIN_DURATION = 60
