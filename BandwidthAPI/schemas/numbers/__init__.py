"""
Numbers (v2) API data shapes
"""

from .account import Account, AccountResponse
from .addresses import Address, AddressesResponse, GetAddressesQuery
from .applications import (
    APPLICATION_SERVICE_TYPE_MESSAGING_V2,
    APPLICATION_SERVICE_TYPE_VOICE_V2,
    Application,
    ApplicationCallbackCreds,
    ApplicationResponse,
    ApplicationsResponse,
    AssociatedSipPeer,
    AssociatedSipPeersResponse
)
from .available_numbers import AvailableNumbersResponse, GetAvailableNumbersQuery
from .contacts import Contact
from .disconnects import (
    DISCONNECT_MODE_NORMAL,
    PROTECTED_FALSE,
    PROTECTED_TRUE,
    PROTECTED_UNCHANGED,
    DisconnectTelephoneNumberOrder,
    DisconnectTelephoneNumberOrderRequest,
    DisconnectTelephoneNumberOrderResponse,
    DisconnectTelephoneNumberOrderType
)
from .orders import (
    ORDER_STATUS_COMPLETE,
    ORDER_STATUS_FAILED,
    ORDER_STATUS_RECEIVED,
    AreaCodeSearchAndOrderType,
    CitySearchAndOrderType,
    CombinedSearchAndOrderType,
    CreateOrderResponse,
    ExistingTelephoneNumberOrderType,
    GetOrderResponse,
    LATASearchAndOrderType,
    Order,
    RateCenterSearchAndOrderType,
    StateSearchAndOrderType,
    TollFreeVanitySearchAndOrderType,
    TollFreeWildCharSearchAndOrderType,
    ZIPSearchAndOrderType
)
