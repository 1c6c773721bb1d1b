"""Application constants.

This module contains magic strings and numbers used throughout the application.
Centralizing these values makes them easier to maintain and modify.
"""

# Office presence values
# A founder is always in exactly one of these two states
STATUS_IN_OFFICE = "In Office"
STATUS_OUT_OF_OFFICE = "Out of Office"
STATUS_VALUES = (STATUS_IN_OFFICE, STATUS_OUT_OF_OFFICE)
DEFAULT_STATUS = STATUS_OUT_OF_OFFICE

# Poll Options
# A poll needs at least two choices to be meaningful
MIN_POLL_OPTIONS = 2
MAX_POLL_OPTIONS = 10

# Pagination
# Feed, updates and polls are all served 10 at a time
PAGE_SIZE = 10
# Number of recent updates shown on a profile page
PROFILE_RECENT_UPDATES = 10

# JWT Token Configuration
# Token expiration time in minutes (7 days)
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24 * 7
