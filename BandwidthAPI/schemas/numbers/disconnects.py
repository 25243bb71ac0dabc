"""
Disconnect order schemas (Numbers API)
"""

from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import Field

from ..base import XMLModel

DISCONNECT_MODE_NORMAL = "normal"

PROTECTED_TRUE = "TRUE"
PROTECTED_FALSE = "FALSE"
PROTECTED_UNCHANGED = "UNCHANGED"


class DisconnectTelephoneNumberOrderType(XMLModel):
    """The numbers to disconnect and how"""

    xml_tag: ClassVar[str] = "DisconnectTelephoneNumberOrderType"

    telephone_numbers: List[str] = Field(default_factory=list, alias="TelephoneNumberList>TelephoneNumber")
    disconnect_mode: Optional[str] = Field(None, alias="DisconnectMode")
    protected: Optional[str] = Field(None, alias="Protected")


class DisconnectTelephoneNumberOrder(XMLModel):
    """An order to disconnect a list of telephone numbers"""

    xml_tag: ClassVar[str] = "DisconnectTelephoneNumberOrder"

    name: Optional[str] = Field(None, alias="name")
    customer_order_id: Optional[str] = Field(None, alias="CustomerOrderID")
    disconnect_telephone_number_order_type: Optional[DisconnectTelephoneNumberOrderType] = Field(
        None, alias="DisconnectTelephoneNumberOrderType")


class DisconnectTelephoneNumberOrderRequest(XMLModel):
    """The order request echoed inside a disconnect order response"""

    xml_tag: ClassVar[str] = "orderRequest"

    id: Optional[str] = Field(None, alias="id")
    name: Optional[str] = Field(None, alias="name")
    customer_order_id: Optional[str] = Field(None, alias="CustomerOrderID")
    order_create_date: Optional[datetime] = Field(None, alias="OrderCreateDate")
    disconnect_telephone_number_order_type: Optional[DisconnectTelephoneNumberOrderType] = Field(
        None, alias="DisconnectTelephoneNumberOrderType")


class DisconnectTelephoneNumberOrderResponse(XMLModel):
    """Response for create_disconnect_order"""

    xml_tag: ClassVar[str] = "DisconnectTelephoneNumberOrderResponse"

    order_request: Optional[DisconnectTelephoneNumberOrderRequest] = Field(None, alias="orderRequest")
    order_status: Optional[str] = Field(None, alias="OrderStatus")
