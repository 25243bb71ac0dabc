"""
Application schemas (Numbers API)
"""

from typing import ClassVar, List, Optional

from pydantic import Field

from ..base import XMLModel

APPLICATION_SERVICE_TYPE_MESSAGING_V2 = "Messaging-V2"
APPLICATION_SERVICE_TYPE_VOICE_V2 = "Voice-V2"


class ApplicationCallbackCreds(XMLModel):
    """Callback credentials for an application"""

    xml_tag: ClassVar[str] = "CallbackCreds"

    user_id: Optional[str] = Field(None, alias="UserId")
    password: Optional[str] = Field(None, alias="Password")


class Application(XMLModel):
    """An application in an account"""

    xml_tag: ClassVar[str] = "Application"

    application_id: Optional[str] = Field(None, alias="ApplicationId")
    service_type: Optional[str] = Field(None, alias="ServiceType")
    app_name: Optional[str] = Field(None, alias="AppName")
    msg_callback_url: Optional[str] = Field(None, alias="MsgCallbackUrl")
    call_initiated_callback_url: Optional[str] = Field(None, alias="CallInitiatedCallbackUrl")
    call_initiated_method: Optional[str] = Field(None, alias="CallInitiatedMethod")
    call_status_callback_url: Optional[str] = Field(None, alias="CallStatusCallbackUrl")
    call_status_method: Optional[str] = Field(None, alias="CallStatusMethod")
    callback_creds: Optional[ApplicationCallbackCreds] = Field(None, alias="CallbackCreds")


class ApplicationsResponse(XMLModel):
    """Response for get_applications"""

    xml_tag: ClassVar[str] = "ApplicationProvisioningResponse"

    applications: List[Application] = Field(default_factory=list, alias="ApplicationList>Application")


class ApplicationResponse(XMLModel):
    """Response for get_application, create_application and update_application"""

    xml_tag: ClassVar[str] = "ApplicationProvisioningResponse"

    application: Optional[Application] = Field(None, alias="Application")


class AssociatedSipPeer(XMLModel):
    """A SIP peer associated to an application"""

    xml_tag: ClassVar[str] = "AssociatedSipPeer"

    site_id: Optional[str] = Field(None, alias="SiteId")
    site_name: Optional[str] = Field(None, alias="SiteName")
    peer_id: Optional[str] = Field(None, alias="PeerId")
    peer_name: Optional[str] = Field(None, alias="PeerName")


class AssociatedSipPeersResponse(XMLModel):
    """Response for get_application_associated_sip_peers"""

    xml_tag: ClassVar[str] = "AssociatedSipPeersResponse"

    associated_sip_peers: List[AssociatedSipPeer] = Field(
        default_factory=list, alias="AssociatedSipPeers>AssociatedSipPeer"
    )
