"""
Address schemas (Numbers API)
"""

from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..base import XMLModel


class Address(XMLModel):
    """Address for an account"""

    xml_tag: ClassVar[str] = "Address"

    house_number: Optional[int] = Field(None, alias="HouseNumber")
    house_suffix: Optional[str] = Field(None, alias="HouseSuffix")
    pre_directional: Optional[str] = Field(None, alias="PreDirectional")
    street_name: Optional[str] = Field(None, alias="StreetName")
    street_suffix: Optional[str] = Field(None, alias="StreetSuffix")
    post_directional: Optional[str] = Field(None, alias="PostDirectional")
    address_line2: Optional[str] = Field(None, alias="AddressLine2")
    city: Optional[str] = Field(None, alias="City")
    state_code: Optional[str] = Field(None, alias="StateCode")
    # kept as text so leading zeros survive
    zip: Optional[str] = Field(None, alias="Zip")
    plus_four: Optional[str] = Field(None, alias="PlusFour")
    county: Optional[str] = Field(None, alias="County")
    country: Optional[str] = Field(None, alias="Country")
    address_type: Optional[str] = Field(None, alias="AddressType")
    endpoint_count: Optional[int] = Field(None, alias="EndpointCount")
    validation_status: Optional[str] = Field(None, alias="ValidationStatus")


class AddressesResponse(XMLModel):
    """Response for get_addresses"""

    xml_tag: ClassVar[str] = "AddressesResponse"

    total_count: Optional[int] = Field(None, alias="TotalCount")
    addresses: List[Address] = Field(default_factory=list, alias="Addresses>Address")


class GetAddressesQuery(BaseModel):
    """Query parameters of get_addresses"""

    model_config = ConfigDict(populate_by_name=True)

    e911_location_id: Optional[str] = Field(None, alias="e911locationid")
    page: Optional[int] = None
    size: Optional[int] = None
    suggestions: Optional[str] = None
    type: Optional[str] = None
