"""Domain-level pickup description owned by the caller.

Numbers stay numeric here; converting them to the carrier's string fields is
the wire mapper's job.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Phone(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: str


class Address(BaseModel):
    """Street address where the pickup will be made."""

    model_config = ConfigDict(frozen=True)

    address_line: str
    city: str
    state_province_code: str = Field(max_length=2)
    postal_code: str
    country_code: str = Field(min_length=2, max_length=2)


class Requester(BaseModel):
    """Who is scheduling the pickup; the confirmation email goes to `email_address`."""

    model_config = ConfigDict(frozen=True)

    name: str
    attention_name: str
    email_address: str
    phone: Phone


class ShipFrom(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    attention_name: str
    address: Address
    phone: Phone


class PackagingType(BaseModel):
    """Three-character carrier code plus its matching text, e.g. SKD / Skid."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1, max_length=3)
    description: str


class ShipmentDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    hazmat: bool = False
    packaging_type: PackagingType
    number_of_pieces: int = Field(gt=0)
    description_of_commodity: str
    weight: Decimal = Field(gt=0, decimal_places=2)


class ScheduleWindow(BaseModel):
    """Earliest and latest ready times for one pickup date.

    Formatting uses the timestamps as given, so the date and times are in
    whatever zone the caller supplied.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @property
    def pickup_date(self) -> str:
        return self.start.strftime("%Y%m%d")

    @property
    def earliest_time_ready(self) -> str:
        return self.start.strftime("%H%M")

    @property
    def latest_time_ready(self) -> str:
        return self.end.strftime("%H%M")


class PickupDescription(BaseModel):
    """Everything the carrier needs to schedule one LTL pickup."""

    model_config = ConfigDict(frozen=True)

    customer_context: str = Field(min_length=1)
    requester: Requester
    ship_from: ShipFrom
    shipment_detail: ShipmentDetail
    destination_postal_code: str
    destination_country_code: str = Field(min_length=2, max_length=2)
    additional_comments: str = ""
    schedule: ScheduleWindow
