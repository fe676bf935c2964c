"""DynamoDB-backed saved trip collection.

Single table, keyed by ``pk``. Every trip is stored as a ``TRIP#<id>`` item
next to an ``APIID#<apiId>`` guard item. Both are written in one transaction
and the guard put is conditioned on the key not existing, which makes apiId
uniqueness a store-level constraint instead of a check-then-insert race.
Deletes remove both items in one transaction as well, so a guard is never
left behind without its trip.
"""

import asyncio
import logging
import re
from typing import Any
from uuid import uuid4

from botocore.exceptions import ClientError

from core.db.interface import DuplicateApiIdError, TripCollection
from core.models.trip import SavedTrip, SavedTripCreate

logger = logging.getLogger(__name__)

TRIP_PREFIX = "TRIP#"
API_ID_PREFIX = "APIID#"
TRIP_ENTITY = "TRIP"
API_ID_ENTITY = "APIID"

_TRIP_ID = re.compile(r"^[0-9a-f]{32}$")

# Filter keys accepted by find()/find_one() and the attribute each one reads.
_FILTER_ATTRIBUTES = {
    "api_id": "apiId",
    "origin": "origin",
    "destination": "destination",
    "type": "type",
    "display_name": "display_name",
}


class DynamoTripCollection(TripCollection):
    def __init__(self, dynamo_client: Any, table_name: str) -> None:
        self._client = dynamo_client
        self._table_name = table_name

    def is_valid_id(self, trip_id: str) -> bool:
        return isinstance(trip_id, str) and bool(_TRIP_ID.match(trip_id))

    async def find(self, filter: dict[str, str]) -> list[SavedTrip]:
        return await asyncio.to_thread(self._scan, filter)

    async def find_one(self, filter: dict[str, str]) -> SavedTrip | None:
        if set(filter) == {"api_id"}:
            return await asyncio.to_thread(self._get_by_api_id, filter["api_id"])
        trips = await self.find(filter)
        return trips[0] if trips else None

    async def create(self, record: SavedTripCreate) -> SavedTrip:
        return await asyncio.to_thread(self._put, record)

    async def find_by_id_and_delete(self, trip_id: str) -> SavedTrip | None:
        return await asyncio.to_thread(self._delete, trip_id)

    def _scan(self, filter: dict[str, str]) -> list[SavedTrip]:
        names = {"#entity_type": "entity_type"}
        values: dict[str, Any] = {":entity_type": {"S": TRIP_ENTITY}}
        conditions = ["#entity_type = :entity_type"]
        for index, (key, value) in enumerate(sorted(filter.items())):
            if key not in _FILTER_ATTRIBUTES:
                raise ValueError(f"Unsupported filter key: {key}")
            names[f"#f{index}"] = _FILTER_ATTRIBUTES[key]
            values[f":f{index}"] = {"S": value}
            conditions.append(f"#f{index} = :f{index}")

        trips: list[SavedTrip] = []
        last_key = None
        while True:
            scan_kwargs: dict[str, Any] = {
                "TableName": self._table_name,
                "FilterExpression": " AND ".join(conditions),
                "ExpressionAttributeNames": names,
                "ExpressionAttributeValues": values,
            }
            if last_key:
                scan_kwargs["ExclusiveStartKey"] = last_key

            response = self._client.scan(**scan_kwargs)
            trips.extend(_to_trip(item) for item in response.get("Items", []))

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break

        return trips

    def _get_by_api_id(self, api_id: str) -> SavedTrip | None:
        guard = self._client.get_item(
            TableName=self._table_name,
            Key={"pk": {"S": f"{API_ID_PREFIX}{api_id}"}},
            ConsistentRead=True,
        ).get("Item")
        if not guard:
            return None

        item = self._client.get_item(
            TableName=self._table_name,
            Key={"pk": {"S": f"{TRIP_PREFIX}{guard['tripId']['S']}"}},
            ConsistentRead=True,
        ).get("Item")
        return _to_trip(item) if item else None

    def _put(self, record: SavedTripCreate) -> SavedTrip:
        trip = SavedTrip.model_validate({**record.model_dump(), "id": uuid4().hex})
        try:
            self._client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self._table_name,
                            "Item": _to_guard_item(trip),
                            "ConditionExpression": "attribute_not_exists(pk)",
                        }
                    },
                    {
                        "Put": {
                            "TableName": self._table_name,
                            "Item": _to_item(trip),
                            "ConditionExpression": "attribute_not_exists(pk)",
                        }
                    },
                ]
            )
        except ClientError as e:
            if _condition_failed(e, index=0):
                raise DuplicateApiIdError(record.api_id) from e
            raise

        logger.info("Stored trip %s (apiId %s)", trip.id, trip.api_id)
        return trip

    def _delete(self, trip_id: str) -> SavedTrip | None:
        trip_key = {"pk": {"S": f"{TRIP_PREFIX}{trip_id}"}}
        item = self._client.get_item(TableName=self._table_name, Key=trip_key, ConsistentRead=True).get("Item")
        if not item:
            return None

        trip = _to_trip(item)
        try:
            self._client.transact_write_items(
                TransactItems=[
                    {
                        "Delete": {
                            "TableName": self._table_name,
                            "Key": trip_key,
                            "ConditionExpression": "attribute_exists(pk)",
                        }
                    },
                    {
                        "Delete": {
                            "TableName": self._table_name,
                            "Key": {"pk": {"S": f"{API_ID_PREFIX}{trip.api_id}"}},
                        }
                    },
                ]
            )
        except ClientError as e:
            # Deleted by someone else between the read and the transaction.
            if _condition_failed(e, index=0):
                return None
            raise

        logger.info("Deleted trip %s (apiId %s)", trip.id, trip.api_id)
        return trip


def _condition_failed(error: ClientError, index: int) -> bool:
    if error.response.get("Error", {}).get("Code") != "TransactionCanceledException":
        return False
    reasons = error.response.get("CancellationReasons") or []
    return len(reasons) > index and reasons[index].get("Code") == "ConditionalCheckFailed"


def _to_item(trip: SavedTrip) -> dict[str, Any]:
    return {
        "pk": {"S": f"{TRIP_PREFIX}{trip.id}"},
        "entity_type": {"S": TRIP_ENTITY},
        "id": {"S": trip.id},
        "apiId": {"S": trip.api_id},
        "origin": {"S": trip.origin.value},
        "destination": {"S": trip.destination.value},
        "cost": {"N": str(trip.cost)},
        "duration": {"N": str(trip.duration)},
        "type": {"S": trip.type},
        "display_name": {"S": trip.display_name},
    }


def _to_guard_item(trip: SavedTrip) -> dict[str, Any]:
    return {
        "pk": {"S": f"{API_ID_PREFIX}{trip.api_id}"},
        "entity_type": {"S": API_ID_ENTITY},
        "tripId": {"S": trip.id},
    }


def _to_trip(item: dict[str, Any]) -> SavedTrip:
    return SavedTrip.model_validate(
        {
            "id": item["id"]["S"],
            "apiId": item["apiId"]["S"],
            "origin": item["origin"]["S"],
            "destination": item["destination"]["S"],
            "cost": float(item["cost"]["N"]),
            "duration": float(item["duration"]["N"]),
            "type": item["type"]["S"],
            "display_name": item["display_name"]["S"],
        }
    )
