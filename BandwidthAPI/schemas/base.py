"""
Base schema for data shapes exchanged with the XML (Numbers) API
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class XMLModel(BaseModel):
    """
    Pydantic model with an XML element mapping

    ``xml_tag`` names the element used when the model is the document root.
    Field aliases name child elements; ``"Wrapper>Item"`` nests ``Item``
    elements inside a ``Wrapper`` element.
    """

    model_config = ConfigDict(populate_by_name=True)

    xml_tag: ClassVar[str] = ""
