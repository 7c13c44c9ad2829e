"""UPS Freight Pickup request schema and the domain -> wire mapping.

Field aliases are the exact names the carrier's JSON API expects. Counts and
weights are strings on the wire; the carrier rejects native JSON numbers.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError

from freightpickup.common.config import Credentials
from freightpickup.services.pickup.errors import EncodingError
from freightpickup.services.pickup.models import PickupDescription


HAZMAT_INDICATOR = "Y"


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class CodeDescription(WireModel):
    code: str = Field(default="", alias="Code")
    description: str = Field(default="", alias="Description")


WEIGHT_UNIT = CodeDescription(code="LBS", description="Pounds")


class UsernameToken(WireModel):
    username: str = Field(alias="Username")
    password: str = Field(alias="Password")


class ServiceAccessToken(WireModel):
    access_license_number: str = Field(alias="AccessLicenseNumber")


class Security(WireModel):
    """Website login plus API access key."""

    username_token: UsernameToken = Field(alias="UsernameToken")
    service_access_token: ServiceAccessToken = Field(alias="UPSServiceAccessToken")


class TransactionReference(WireModel):
    customer_context: str = Field(default="", alias="CustomerContext")


class RequestBlock(WireModel):
    transaction_reference: TransactionReference = Field(alias="TransactionReference")


class WirePhone(WireModel):
    number: str = Field(alias="Number")


class WireAddress(WireModel):
    address_line: str = Field(alias="AddressLine")
    city: str = Field(alias="City")
    state_province_code: str = Field(alias="StateProvinceCode")
    postal_code: str = Field(alias="PostalCode")
    country_code: str = Field(alias="CountryCode")


class WireRequester(WireModel):
    attention_name: str = Field(alias="AttentionName")
    email_address: str = Field(alias="EMailAddress")
    name: str = Field(alias="Name")
    phone: WirePhone = Field(alias="Phone")


class WireShipFrom(WireModel):
    attention_name: str = Field(alias="AttentionName")
    name: str = Field(alias="Name")
    address: WireAddress = Field(alias="Address")
    phone: WirePhone = Field(alias="Phone")


class WireWeight(WireModel):
    unit_of_measurement: CodeDescription = Field(alias="UnitOfMeasurement")
    value: str = Field(alias="Value")


class WireShipmentDetail(WireModel):
    hazmat_indicator: str = Field(alias="HazMatIndicator")
    packaging_type: CodeDescription = Field(alias="PackagingType")
    number_of_pieces: str = Field(alias="NumberOfPieces")
    description_of_commodity: str = Field(alias="DescriptionOfCommodity")
    weight: WireWeight = Field(alias="Weight")


class FreightPickupRequest(WireModel):
    request: RequestBlock = Field(alias="Request")
    additional_comments: str = Field(alias="AdditionalComments")
    destination_postal_code: str = Field(alias="DestinationPostalCode")
    destination_country_code: str = Field(alias="DestinationCountryCode")
    requester: WireRequester = Field(alias="Requester")
    ship_from: WireShipFrom = Field(alias="ShipFrom")
    shipment_detail: WireShipmentDetail = Field(alias="ShipmentDetail")
    pickup_date: str = Field(alias="PickupDate")
    earliest_time_ready: str = Field(alias="EarliestTimeReady")
    latest_time_ready: str = Field(alias="LatestTimeReady")


class WireRequest(WireModel):
    """Top-level document POSTed to the FreightPickup endpoint."""

    security: Security = Field(alias="Security")
    freight_pickup_request: FreightPickupRequest = Field(alias="FreightPickupRequest")


def _decimal_text(value: Decimal) -> str:
    """Render a weight with at most two decimals and no exponent: 1500.00 -> "1500"."""

    quantized = value.quantize(Decimal("0.01"))
    return format(quantized.normalize(), "f")


def _security(credentials: Credentials) -> Security:
    return Security(
        username_token=UsernameToken(
            username=credentials.username,
            password=credentials.password.get_secret_value(),
        ),
        service_access_token=ServiceAccessToken(
            access_license_number=credentials.access_key.get_secret_value(),
        ),
    )


def to_wire_request(description: PickupDescription, credentials: Credentials) -> WireRequest:
    """Map a pickup description and credentials onto the carrier request schema.

    Pure and total: identical inputs always produce identical field values.
    The weight unit is always pounds regardless of the description.
    """

    requester = description.requester
    ship_from = description.ship_from
    detail = description.shipment_detail
    schedule = description.schedule

    return WireRequest(
        security=_security(credentials),
        freight_pickup_request=FreightPickupRequest(
            request=RequestBlock(
                transaction_reference=TransactionReference(customer_context=description.customer_context),
            ),
            additional_comments=description.additional_comments,
            destination_postal_code=description.destination_postal_code,
            destination_country_code=description.destination_country_code,
            requester=WireRequester(
                attention_name=requester.attention_name,
                email_address=requester.email_address,
                name=requester.name,
                phone=WirePhone(number=requester.phone.number),
            ),
            ship_from=WireShipFrom(
                attention_name=ship_from.attention_name,
                name=ship_from.name,
                address=WireAddress(
                    address_line=ship_from.address.address_line,
                    city=ship_from.address.city,
                    state_province_code=ship_from.address.state_province_code,
                    postal_code=ship_from.address.postal_code,
                    country_code=ship_from.address.country_code,
                ),
                phone=WirePhone(number=ship_from.phone.number),
            ),
            shipment_detail=WireShipmentDetail(
                hazmat_indicator=HAZMAT_INDICATOR if detail.hazmat else "",
                packaging_type=CodeDescription(
                    code=detail.packaging_type.code,
                    description=detail.packaging_type.description,
                ),
                number_of_pieces=str(detail.number_of_pieces),
                description_of_commodity=detail.description_of_commodity,
                weight=WireWeight(unit_of_measurement=WEIGHT_UNIT, value=_decimal_text(detail.weight)),
            ),
            pickup_date=schedule.pickup_date,
            earliest_time_ready=schedule.earliest_time_ready,
            latest_time_ready=schedule.latest_time_ready,
        ),
    )


def encode_wire_request(wire: WireRequest) -> bytes:
    """Serialize the request with carrier field names as UTF-8 JSON."""

    try:
        return wire.model_dump_json(by_alias=True).encode("utf-8")
    except PydanticSerializationError as exc:
        raise EncodingError(f"could not encode pickup request: {exc}") from exc
