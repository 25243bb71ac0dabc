"""
Available number search schemas (Numbers API)
"""

from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..base import XMLModel


class AvailableNumbersResponse(XMLModel):
    """Response for get_available_numbers"""

    xml_tag: ClassVar[str] = "SearchResult"

    result_count: Optional[int] = Field(None, alias="ResultCount")
    telephone_numbers: List[str] = Field(default_factory=list, alias="TelephoneNumberList>TelephoneNumber")


class GetAvailableNumbersQuery(BaseModel):
    """Query parameters of get_available_numbers; quantity is always sent"""

    model_config = ConfigDict(populate_by_name=True)

    lca: Optional[bool] = Field(None, alias="LCA")
    area_code: Optional[int] = Field(None, alias="areaCode")
    city: Optional[str] = None
    ends_in: Optional[bool] = Field(None, alias="endsIn")
    lata: Optional[int] = None
    local_vanity: Optional[str] = Field(None, alias="localVanity")
    order_by: Optional[str] = Field(None, alias="orderBy")
    quantity: int = 0
    rate_center: Optional[str] = Field(None, alias="rateCenter")
    state: Optional[str] = None
    toll_free_vanity: Optional[str] = Field(None, alias="tollFreeVanity")
    toll_free_wild_card_pattern: Optional[str] = Field(None, alias="tollFreeWildCardPattern")
    zip: Optional[str] = None
