"""Bounds for entity identifiers.

Ids live in INTEGER columns, which are signed 32-bit on PostgreSQL. A number
outside that range can never name a stored row.
"""

MAX_ID = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """True if ``value`` could be the id of a stored entity."""
    return 0 < value <= MAX_ID
