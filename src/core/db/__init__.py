"""
Saved trip persistence.

TripCollection is the narrow interface the core depends on;
DynamoTripCollection is the deployed implementation.
"""

from core.db.dynamo import DynamoTripCollection
from core.db.interface import DuplicateApiIdError, TripCollection

__all__ = ["DuplicateApiIdError", "DynamoTripCollection", "TripCollection"]
