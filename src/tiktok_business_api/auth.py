"""OAuth token exchange for the TikTok Business API.

Advertisers grant an application access on TikTok's authorization page,
which redirects back with an ``auth_code``. :class:`Auth` turns that code
into an access token, refreshes and revokes tokens, and lists the
advertiser accounts a token can reach.

Token persistence is explicit: every method that obtains or revokes a
token takes a ``persist`` flag and, when it is set, hands the result to
:meth:`Client.set_access_token`. Pass ``persist=False`` to manage tokens
yourself.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional
from urllib.parse import urlencode

if TYPE_CHECKING:
    from .client import Client

logger = logging.getLogger(__name__)

ACCESS_TOKEN_PATH = "oauth2/access_token/"
REFRESH_TOKEN_PATH = "tt_user/oauth2/refresh_token/"
REVOKE_TOKEN_PATH = "oauth2/revoke_token/"
AUTHORIZED_ADVERTISERS_PATH = "oauth2/advertiser/get/"


class Auth:
    """Handles authentication with the TikTok Business API.

    :param client: Client whose settings provide the app credentials
    :type client: Client
    """

    def __init__(self, client: "Client"):
        self.client = client

    @property
    def config(self):
        return self.client.config

    def _path(self, path: str) -> str:
        return f"{self.config.api_version}/{path}"

    @staticmethod
    def extract_access_token(response: Dict[str, Any]) -> Optional[str]:
        """Return ``data.access_token`` from a token response, if present.

        :param response: Response envelope of a token endpoint
        :return: Access token or None
        """
        data = response.get("data") if isinstance(response, dict) else None
        if isinstance(data, dict):
            return data.get("access_token")
        return None

    def generate_access_token(
        self,
        auth_code: str,
        redirect_uri: Optional[str] = None,
        persist: bool = True,
    ) -> Dict[str, Any]:
        """Exchange an authorization code for an access token.

        :param auth_code: Authorization code received on the redirect URI
        :type auth_code: str
        :param redirect_uri: Redirect URI used in the authorization request
        :type redirect_uri: Optional[str]
        :param persist: Store the new token on the client
        :type persist: bool
        :return: Full response envelope
        :rtype: Dict[str, Any]
        """
        params = {
            "app_id": self.config.app_id,
            "secret": self.config.secret,
            "auth_code": auth_code,
            "grant_type": "auth_code",
        }
        if redirect_uri:
            params["redirect_uri"] = redirect_uri

        response = self.client.request("POST", self._path(ACCESS_TOKEN_PATH), params)

        token = self.extract_access_token(response)
        if token and persist:
            self.client.set_access_token(token)
        return response

    def refresh_access_token(
        self, refresh_token: str, persist: bool = True
    ) -> Dict[str, Any]:
        """Refresh an access token (TikTok account tokens).

        :param refresh_token: Refresh token issued with the access token
        :type refresh_token: str
        :param persist: Store the refreshed token on the client
        :type persist: bool
        :return: Full response envelope
        :rtype: Dict[str, Any]
        """
        params = {
            "app_id": self.config.app_id,
            "secret": self.config.secret,
            "refresh_token": refresh_token,
            "grant_type": "refresh_token",
        }

        response = self.client.request("POST", self._path(REFRESH_TOKEN_PATH), params)

        token = self.extract_access_token(response)
        if token and persist:
            self.client.set_access_token(token)
        return response

    def revoke_access_token(
        self, token: Optional[str] = None, persist: bool = True
    ) -> Dict[str, Any]:
        """Revoke an access token.

        :param token: Token to revoke; defaults to the client's current token
        :type token: Optional[str]
        :param persist: Clear the client's token once revoked
        :type persist: bool
        :return: Full response envelope
        :rtype: Dict[str, Any]
        """
        token = token or self.config.access_token
        params = {
            "app_id": self.config.app_id,
            "secret": self.config.secret,
            "access_token": token,
        }

        response = self.client.request("POST", self._path(REVOKE_TOKEN_PATH), params)

        if persist and response.get("code") == 0:
            self.client.set_access_token(None)
        return response

    def get_authorized_advertisers(
        self,
        access_token: Optional[str] = None,
        app_id: Optional[str] = None,
        secret: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Get the advertiser accounts a token has been authorized for.

        :param access_token: Token to use; defaults to the client's token
        :type access_token: Optional[str]
        :param app_id: App ID; defaults to the configured one
        :type app_id: Optional[str]
        :param secret: App secret; defaults to the configured one
        :type secret: Optional[str]
        :return: Full response envelope, advertisers under ``data.list``
        :rtype: Dict[str, Any]
        """
        params = {
            "app_id": app_id or self.config.app_id,
            "secret": secret or self.config.secret,
        }
        headers = {}
        token = access_token or self.config.access_token
        if token:
            headers["Access-Token"] = token

        return self.client.request(
            "GET", self._path(AUTHORIZED_ADVERTISERS_PATH), params, headers
        )

    def authorization_url(
        self,
        redirect_uri: str,
        state: Optional[str] = None,
        scope: Optional[Iterable[str]] = None,
    ) -> str:
        """Build the URL advertisers visit to authorize the application.

        :param redirect_uri: Where TikTok sends the authorization code
        :type redirect_uri: str
        :param state: Optional opaque value echoed back for CSRF protection
        :type state: Optional[str]
        :param scope: Optional permission scopes
        :type scope: Optional[Iterable[str]]
        :return: Authorization URL
        :rtype: str
        """
        params = {"app_id": self.config.app_id, "redirect_uri": redirect_uri}
        if state:
            params["state"] = state
        scopes = list(scope or [])
        if scopes:
            params["scope"] = ",".join(scopes)

        return f"{self.config.auth_url}?{urlencode(params)}"
