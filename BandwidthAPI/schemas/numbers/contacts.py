"""
Contact schema (Numbers API)
"""

from typing import ClassVar, Optional

from pydantic import Field

from ..base import XMLModel


class Contact(XMLModel):
    """Contact for an account"""

    xml_tag: ClassVar[str] = "Contact"

    first_name: Optional[str] = Field(None, alias="FirstName")
    last_name: Optional[str] = Field(None, alias="LastName")
    phone: Optional[str] = Field(None, alias="Phone")
    email: Optional[str] = Field(None, alias="Email")
