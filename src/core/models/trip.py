import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

_UUID_V4 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.IGNORECASE)


class AirportCode(str, Enum):
    """IATA codes served by the flight-search provider."""

    ATL = "ATL"
    PEK = "PEK"
    LAX = "LAX"
    DXB = "DXB"
    HND = "HND"
    ORD = "ORD"
    LHR = "LHR"
    PVG = "PVG"
    CDG = "CDG"
    DFW = "DFW"
    AMS = "AMS"
    FRA = "FRA"
    IST = "IST"
    CAN = "CAN"
    JFK = "JFK"
    SIN = "SIN"
    DEN = "DEN"
    ICN = "ICN"
    BKK = "BKK"
    SFO = "SFO"
    LAS = "LAS"
    CLT = "CLT"
    MIA = "MIA"
    KUL = "KUL"
    SEA = "SEA"
    MUC = "MUC"
    EWR = "EWR"
    MAD = "MAD"
    HKG = "HKG"
    MCO = "MCO"
    PHX = "PHX"
    IAH = "IAH"
    SYD = "SYD"
    MEL = "MEL"
    GRU = "GRU"
    YYZ = "YYZ"
    LGW = "LGW"
    BCN = "BCN"
    MAN = "MAN"
    BOM = "BOM"
    DEL = "DEL"
    ZRH = "ZRH"
    SVO = "SVO"
    DME = "DME"
    JNB = "JNB"
    ARN = "ARN"
    OSL = "OSL"
    CPH = "CPH"
    HEL = "HEL"
    VIE = "VIE"


class SortBy(str, Enum):
    FASTEST = "fastest"
    CHEAPEST = "cheapest"


def parse_airport_code(value: object, field_name: str) -> AirportCode:
    try:
        return AirportCode(value)
    except ValueError:
        raise ValueError(f"{field_name} must be an available IATA code") from None


def parse_sort_by(value: object) -> SortBy:
    try:
        return SortBy(value)
    except ValueError:
        raise ValueError('sort_by must be either "fastest" or "cheapest"') from None


class Trip(BaseModel):
    """A search result from the flight-search provider. Never persisted."""

    origin: AirportCode
    destination: AirportCode
    cost: float = Field(..., ge=0)
    duration: float = Field(..., ge=0)
    id: str | None = None
    type: str | None = None
    display_name: str | None = None


class SavedTripCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    api_id: str = Field(..., alias="apiId")
    origin: AirportCode
    destination: AirportCode
    cost: float = Field(..., strict=True, allow_inf_nan=False)
    duration: float = Field(..., strict=True, allow_inf_nan=False)
    type: str
    display_name: str

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

    @field_validator("api_id")
    @classmethod
    def api_id_is_uuid_v4(cls, value: str) -> str:
        if not _UUID_V4.match(value):
            raise ValueError("apiId must be a UUID v4")
        return value


class SavedTrip(SavedTripCreate):
    id: str
