"""
Pydantic schema definitions for API payloads.

Each resource defines its own request and response models.  Schemas
are separated from the domain records so that the API representation
can evolve independently of storage.
"""

# Money amounts are stored as signed 64-bit integers.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
