"""
Account schemas (Numbers API)
"""

from typing import ClassVar, List, Optional

from pydantic import Field

from ..base import XMLModel
from .addresses import Address
from .contacts import Contact


class Account(XMLModel):
    """Account information"""

    xml_tag: ClassVar[str] = "Account"

    account_id: Optional[str] = Field(None, alias="AccountId")
    associated_catapult_account: Optional[str] = Field(None, alias="AssociatedCatapultAccount")
    global_account_number: Optional[str] = Field(None, alias="GlobalAccountNumber")
    company_name: Optional[str] = Field(None, alias="CompanyName")
    account_type: Optional[str] = Field(None, alias="AccountType")
    nena_id: Optional[str] = Field(None, alias="NenaId")
    customer_segment: Optional[str] = Field(None, alias="CustomerSegment")
    tiers: List[int] = Field(default_factory=list, alias="Tiers>Tier")
    address: Optional[Address] = Field(None, alias="Address")
    contact: Optional[Contact] = Field(None, alias="Contact")
    alt_spid: Optional[str] = Field(None, alias="AltSpid")
    spid: Optional[str] = Field(None, alias="SPID")
    port_carrier_type: Optional[str] = Field(None, alias="PortCarrierType")


class AccountResponse(XMLModel):
    """Response for get_account"""

    xml_tag: ClassVar[str] = "AccountResponse"

    account: Optional[Account] = Field(None, alias="Account")
