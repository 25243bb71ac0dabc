"""
Media file schemas (Catapult API)
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MediaFile(BaseModel):
    """A media file stored for a Catapult user"""

    model_config = ConfigDict(populate_by_name=True)

    content_length: Optional[int] = Field(None, alias="contentLength", description="Size in bytes")
    content: Optional[str] = Field(None, description="URL of the media content")
    media_name: Optional[str] = Field(None, alias="mediaName", description="Name of the media file")
