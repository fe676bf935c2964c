from pydantic import BaseModel, ValidationInfo, field_validator

from core.models.trip import AirportCode, SortBy, parse_airport_code, parse_sort_by


class SearchTripsRequest(BaseModel):
    origin: AirportCode
    destination: AirportCode
    sort_by: SortBy

    @field_validator("origin", "destination", mode="before")
    @classmethod
    def known_airport(cls, value: object, info: ValidationInfo) -> AirportCode:
        return parse_airport_code(value, info.field_name)

    @field_validator("destination")
    @classmethod
    def destination_differs_from_origin(cls, value: AirportCode, info: ValidationInfo) -> AirportCode:
        if info.data.get("origin") == value:
            raise ValueError("origin and destination cannot be the same")
        return value

    @field_validator("sort_by", mode="before")
    @classmethod
    def known_sort(cls, value: object) -> SortBy:
        return parse_sort_by(value)


class ListSavedTripsRequest(BaseModel):
    """Filter is applied only when both origin and destination are given."""

    origin: AirportCode | None = None
    destination: AirportCode | None = None
    sort_by: SortBy | None = None

    @field_validator("origin", "destination", mode="before")
    @classmethod
    def known_airport(cls, value: object, info: ValidationInfo) -> AirportCode | None:
        if value is None:
            return None
        return parse_airport_code(value, info.field_name)

    @field_validator("destination")
    @classmethod
    def destination_differs_from_origin(cls, value: AirportCode | None, info: ValidationInfo) -> AirportCode | None:
        if value is not None and info.data.get("origin") == value:
            raise ValueError("origin and destination cannot be the same")
        return value

    @field_validator("sort_by", mode="before")
    @classmethod
    def known_sort(cls, value: object) -> SortBy | None:
        if value is None:
            return None
        return parse_sort_by(value)
