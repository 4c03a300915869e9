"""Shared error code constants.

These constants are domain-agnostic and intended for stable machine-readable
handling across coordinators. Component-specific codes should extend this set
in local component modules rather than modifying shared constants.
"""

# Precondition
PRECONDITION_VIOLATION = "PRECONDITION_VIOLATION"
STALE_SELECTION = "STALE_SELECTION"
NO_ACTIVE_SELECTION = "NO_ACTIVE_SELECTION"
DUPLICATE_DEFINITION = "DUPLICATE_DEFINITION"
REENTRANT_PUBLISH = "REENTRANT_PUBLISH"
RUNAWAY_CASCADE = "RUNAWAY_CASCADE"

# Not found
NOT_FOUND = "NOT_FOUND"
SERVICE_NOT_FOUND = "SERVICE_NOT_FOUND"
VERSION_NOT_FOUND = "VERSION_NOT_FOUND"
