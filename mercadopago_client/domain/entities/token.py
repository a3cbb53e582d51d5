"""OAuth token pair returned by the client-credentials exchange."""

from pydantic import StrictBool, StrictStr

from .base import ProviderRecord


class Tokens(ProviderRecord):
    """
    Access and refresh tokens for one credential pair.

    Attributes:
        access_token: Credential sent with every authenticated call
        refresh_token: Token for renewing access (unused by this client)
        live_mode: True when the token operates on production data
    """

    access_token: StrictStr = ""
    refresh_token: StrictStr = ""
    live_mode: StrictBool = False
