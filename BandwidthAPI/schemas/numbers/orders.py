"""
Order schemas (Numbers API)

An Order carries exactly one of the search-and-order types.
"""

from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import Field

from ..base import XMLModel

ORDER_STATUS_COMPLETE = "COMPLETE"
ORDER_STATUS_FAILED = "FAILED"
ORDER_STATUS_RECEIVED = "RECEIVED"


class ExistingTelephoneNumberOrderType(XMLModel):
    """Order for numbers found with get_available_numbers"""

    xml_tag: ClassVar[str] = "ExistingTelephoneNumberOrderType"

    telephone_numbers: List[str] = Field(default_factory=list, alias="TelephoneNumberList>TelephoneNumber")
    reservation_ids: List[str] = Field(default_factory=list, alias="ReservationIdList>ReservationId")


class AreaCodeSearchAndOrderType(XMLModel):
    xml_tag: ClassVar[str] = "AreaCodeSearchAndOrderType"

    area_code: int = Field(..., alias="AreaCode")
    quantity: int = Field(..., alias="Quantity")


class RateCenterSearchAndOrderType(XMLModel):
    xml_tag: ClassVar[str] = "RateCenterSearchAndOrderType"

    rate_center: str = Field(..., alias="RateCenter")
    state: str = Field(..., alias="State")
    quantity: int = Field(..., alias="Quantity")


class TollFreeVanitySearchAndOrderType(XMLModel):
    xml_tag: ClassVar[str] = "TollFreeVanitySearchAndOrderType"

    toll_free_vanity: str = Field(..., alias="TollFreeVanity")
    quantity: int = Field(..., alias="Quantity")


class TollFreeWildCharSearchAndOrderType(XMLModel):
    xml_tag: ClassVar[str] = "TollFreeWildCharSearchAndOrderType"

    toll_free_wild_card_pattern: str = Field(..., alias="TollFreeWildCardPattern")
    quantity: int = Field(..., alias="Quantity")


class StateSearchAndOrderType(XMLModel):
    xml_tag: ClassVar[str] = "StateSearchAndOrderType"

    state: str = Field(..., alias="State")
    quantity: int = Field(..., alias="Quantity")


class CitySearchAndOrderType(XMLModel):
    xml_tag: ClassVar[str] = "CitySearchAndOrderType"

    city: str = Field(..., alias="City")
    state: str = Field(..., alias="State")
    quantity: int = Field(..., alias="Quantity")


class ZIPSearchAndOrderType(XMLModel):
    xml_tag: ClassVar[str] = "ZIPSearchAndOrderType"

    zip: str = Field(..., alias="Zip")
    quantity: int = Field(..., alias="Quantity")


class LATASearchAndOrderType(XMLModel):
    xml_tag: ClassVar[str] = "LATASearchAndOrderType"

    lata: str = Field(..., alias="Lata")
    quantity: int = Field(..., alias="Quantity")


class CombinedSearchAndOrderType(XMLModel):
    """Order based on a combination of search parameters"""

    xml_tag: ClassVar[str] = "CombinedSearchAndOrderType"

    quantity: int = Field(..., alias="Quantity")
    area_code: Optional[int] = Field(None, alias="AreaCode")
    rate_center: Optional[str] = Field(None, alias="RateCenter")
    state: Optional[str] = Field(None, alias="State")
    lata: Optional[str] = Field(None, alias="Lata")
    city: Optional[str] = Field(None, alias="City")
    zip: Optional[str] = Field(None, alias="Zip")


class Order(XMLModel):
    """An order for telephone numbers"""

    xml_tag: ClassVar[str] = "Order"

    id: Optional[str] = Field(None, alias="id")
    customer_order_id: Optional[str] = Field(None, alias="CustomerOrderId")
    name: Optional[str] = Field(None, alias="Name")
    order_create_date: Optional[datetime] = Field(None, alias="OrderCreateDate")
    peer_id: Optional[str] = Field(None, alias="PeerId")
    back_order_requested: Optional[bool] = Field(None, alias="BackOrderRequested")
    tn_attributes: List[str] = Field(default_factory=list, alias="TnAttributes>TnAttribute")
    partial_allowed: Optional[bool] = Field(None, alias="PartialAllowed")
    site_id: Optional[str] = Field(None, alias="SiteId")

    existing_telephone_number_order: Optional[ExistingTelephoneNumberOrderType] = Field(
        None, alias="ExistingTelephoneNumberOrderType")
    area_code_search_and_order: Optional[AreaCodeSearchAndOrderType] = Field(
        None, alias="AreaCodeSearchAndOrderType")
    rate_center_search_and_order: Optional[RateCenterSearchAndOrderType] = Field(
        None, alias="RateCenterSearchAndOrderType")
    toll_free_vanity_search_and_order: Optional[TollFreeVanitySearchAndOrderType] = Field(
        None, alias="TollFreeVanitySearchAndOrderType")
    toll_free_wild_char_search_and_order: Optional[TollFreeWildCharSearchAndOrderType] = Field(
        None, alias="TollFreeWildCharSearchAndOrderType")
    state_search_and_order: Optional[StateSearchAndOrderType] = Field(
        None, alias="StateSearchAndOrderType")
    city_search_and_order: Optional[CitySearchAndOrderType] = Field(
        None, alias="CitySearchAndOrderType")
    zip_search_and_order: Optional[ZIPSearchAndOrderType] = Field(
        None, alias="ZIPSearchAndOrderType")
    lata_search_and_order: Optional[LATASearchAndOrderType] = Field(
        None, alias="LATASearchAndOrderType")
    combined_search_and_order: Optional[CombinedSearchAndOrderType] = Field(
        None, alias="CombinedSearchAndOrderType")


class GetOrderResponse(XMLModel):
    """Response for get_order"""

    xml_tag: ClassVar[str] = "OrderResponse"

    completed_quantity: Optional[int] = Field(None, alias="CompletedQuantity")
    created_by_user: Optional[str] = Field(None, alias="CreatedByUser")
    last_modified_date: Optional[datetime] = Field(None, alias="LastModifiedDate")
    order_complete_date: Optional[datetime] = Field(None, alias="OrderCompleteDate")
    order: Optional[Order] = Field(None, alias="Order")
    order_status: Optional[str] = Field(None, alias="OrderStatus")
    completed_numbers: List[str] = Field(
        default_factory=list, alias="CompletedNumbers>TelephoneNumber>FullNumber")
    failed_quantity: Optional[int] = Field(None, alias="FailedQuantity")


class CreateOrderResponse(XMLModel):
    """Response for create_order"""

    xml_tag: ClassVar[str] = "OrderResponse"

    order: Optional[Order] = Field(None, alias="Order")
