"""
Numbers (v2) API Client

XML client for number provisioning. Every resource is scoped to the account:
``{base_url}/api/accounts/{account_id}/{path}``.
"""

from typing import Any, Dict, Optional

import httpx

from BandwidthAPI.config import NUMBERS_CONFIG, load_env_settings, validate_credentials
from BandwidthAPI.schemas.numbers import (
    AccountResponse,
    AddressesResponse,
    Application,
    ApplicationResponse,
    ApplicationsResponse,
    AssociatedSipPeersResponse,
    AvailableNumbersResponse,
    CreateOrderResponse,
    DisconnectTelephoneNumberOrder,
    DisconnectTelephoneNumberOrderResponse,
    GetAddressesQuery,
    GetAvailableNumbersQuery,
    GetOrderResponse,
    Order
)
from .base_client import BaseAPIClient, quote_segment
from .codecs import XMLCodec
from .exceptions import ConfigurationError

ENDPOINTS = NUMBERS_CONFIG["endpoints"]


class NumbersClient(BaseAPIClient):
    """
    Numbers API client (XML over HTTPS, Basic auth with username/password)
    """

    codec = XMLCodec()

    def __init__(self,
                 account_id: str,
                 username: str,
                 password: str,
                 base_url: Optional[str] = None,
                 timeout: Optional[float] = None,
                 custom_headers: Optional[Dict[str, str]] = None,
                 http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize Numbers client

        Args:
            account_id: Account id every path is scoped to
            username: API username
            password: API password
            base_url: API endpoint, defaults to NUMBERS_CONFIG
            timeout: Request timeout in seconds
            custom_headers: Additional headers
            http_client: Shared httpx.AsyncClient

        Raises:
            ConfigurationError: If any credential is missing or empty
        """
        missing = validate_credentials("Numbers", {
            "account_id": account_id,
            "username": username,
            "password": password
        })
        if missing:
            raise ConfigurationError(
                f"Missing auth data ({', '.join(missing)}). "
                f"Please use NumbersClient('account-id', 'username', 'password')",
                missing_fields=missing
            )

        self.account_id = account_id

        super().__init__(
            base_url=NUMBERS_CONFIG["base_url"] if base_url is None else base_url,
            username=username,
            password=password,
            user_agent=NUMBERS_CONFIG["user_agent"],
            timeout=NUMBERS_CONFIG["timeout_seconds"] if timeout is None else timeout,
            verify_ssl=NUMBERS_CONFIG["verify_ssl"],
            custom_headers=custom_headers,
            http_client=http_client
        )

        self.logger.info(f"Numbers client initialized ({self.base_url})")

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **overrides: Any) -> "NumbersClient":
        """
        Build a client from BANDWIDTH_* environment variables

        Keyword arguments override values read from the environment.
        """
        settings: Dict[str, Any] = load_env_settings("Numbers", dotenv_path)
        settings.update({key: value for key, value in overrides.items() if value is not None})
        return cls(
            account_id=settings.pop("account_id", ""),
            username=settings.pop("username", ""),
            password=settings.pop("password", ""),
            **settings
        )

    def get_path_prefix(self) -> str:
        return f"api/accounts/{quote_segment(self.account_id)}"

    # Account

    async def get_account(self) -> Optional[AccountResponse]:
        """Return account information"""
        return await self.get(ENDPOINTS["account"], response_type=AccountResponse)

    async def get_addresses(self, query: Optional[GetAddressesQuery] = None) -> Optional[AddressesResponse]:
        """Return addresses for the account"""
        return await self.get(ENDPOINTS["addresses"], query, response_type=AddressesResponse)

    # Applications

    async def get_applications(self) -> Optional[ApplicationsResponse]:
        """Return applications for the account"""
        return await self.get(ENDPOINTS["applications"], response_type=ApplicationsResponse)

    async def get_application(self, app_id: str) -> Optional[ApplicationResponse]:
        return await self.get(
            f"{ENDPOINTS['applications']}/{quote_segment(app_id)}",
            response_type=ApplicationResponse
        )

    async def create_application(self, application: Application) -> Optional[ApplicationResponse]:
        return await self.post(ENDPOINTS["applications"], application, response_type=ApplicationResponse)

    async def update_application(self, application: Application) -> Optional[ApplicationResponse]:
        """Update an application; the path is taken from application.application_id"""
        return await self.put(
            f"{ENDPOINTS['applications']}/{quote_segment(application.application_id or '')}",
            application,
            response_type=ApplicationResponse
        )

    async def delete_application(self, app_id: str) -> None:
        await self.delete(f"{ENDPOINTS['applications']}/{quote_segment(app_id)}")

    async def get_application_associated_sip_peers(self, app_id: str) -> Optional[AssociatedSipPeersResponse]:
        """Return the SIP peers associated to an application"""
        return await self.get(
            f"{ENDPOINTS['applications']}/{quote_segment(app_id)}/associatedsippeers",
            response_type=AssociatedSipPeersResponse
        )

    # Numbers and orders

    async def get_available_numbers(self, query: GetAvailableNumbersQuery) -> Optional[AvailableNumbersResponse]:
        """Search for numbers available to order"""
        return await self.get(ENDPOINTS["available_numbers"], query, response_type=AvailableNumbersResponse)

    async def get_order(self, order_id: str) -> Optional[GetOrderResponse]:
        return await self.get(f"{ENDPOINTS['orders']}/{quote_segment(order_id)}", response_type=GetOrderResponse)

    async def create_order(self, order: Order) -> Optional[CreateOrderResponse]:
        return await self.post(ENDPOINTS["orders"], order, response_type=CreateOrderResponse)

    async def create_disconnect_order(
            self, order: DisconnectTelephoneNumberOrder) -> Optional[DisconnectTelephoneNumberOrderResponse]:
        """Create an order disconnecting the listed numbers"""
        return await self.post(
            ENDPOINTS["disconnects"],
            order,
            response_type=DisconnectTelephoneNumberOrderResponse
        )
