import logging
import time
from typing import Dict, Mapping, Optional
from urllib.parse import urlsplit

import httpx
from dotenv import load_dotenv

from .errors import ScalrHTTPError, UnexpectedResponseError
from .observability import log_event
from .request import RequestDescriptor
from .resources import (
    AccessPolicies,
    AgentPools,
    Environments,
    PolicyGroupEnvironments,
    PolicyGroups,
    Roles,
    SlackIntegrations,
    Tags,
    Teams,
    VcsRevisions,
)
from .response import check_response

DEFAULT_ADDRESS = "https://scalr.io"
DEFAULT_BASE_PATH = "/api/iacp/v3/"
USER_AGENT = "scalr-client-python"
JSONAPI_MEDIA_TYPE = "application/vnd.api+json"
DEFAULT_TIMEOUT_SECONDS = 10.0


def build_base_url(address: str, base_path: str = DEFAULT_BASE_PATH) -> str:
    """Address plus base path (unless the address has its own path), with a trailing slash."""
    address = (address or DEFAULT_ADDRESS).rstrip("/")
    if not urlsplit(address).path:
        address += "/" + (base_path or DEFAULT_BASE_PATH).strip("/")
    return address + "/"


class ScalrClient:
    """
    Shared HTTP client for the Scalr JSON:API.
    - Handles the bearer token, base URL, default headers and timeouts
    - Executes one request per call; never retries
    - Normalizes non-2xx responses into ScalrHTTPError subclasses
    - Resource services hang off the client (client.agent_pools.list(...))
    """

    def __init__(
        self,
        *,
        token: str,
        address: str = DEFAULT_ADDRESS,
        base_path: str = DEFAULT_BASE_PATH,
        headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        token = (token or "").strip()
        if not token:
            raise ValueError("token must be provided.")

        self.base_url = build_base_url(address, base_path)
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("scalr_client.client")

        # Caller headers override defaults; Authorization always wins.
        self.headers: Dict[str, str] = {
            "User-Agent": USER_AGENT,
            "Prefer": "profile=preview",
            "Accept": JSONAPI_MEDIA_TYPE,
        }
        self.headers.update(headers or {})
        self.headers["Authorization"] = f"Bearer {token}"

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(timeout=timeout_seconds)

        self.access_policies = AccessPolicies(self)
        self.agent_pools = AgentPools(self)
        self.environments = Environments(self)
        self.policy_groups = PolicyGroups(self)
        self.policy_group_environments = PolicyGroupEnvironments(self)
        self.roles = Roles(self)
        self.slack_integrations = SlackIntegrations(self)
        self.tags = Tags(self)
        self.teams = Teams(self)
        self.vcs_revisions = VcsRevisions(self)

    @classmethod
    def from_env(cls, **kwargs) -> "ScalrClient":
        """Same settings as config.create_client_from_env; kwargs override them."""
        from .config import load_env_config

        options = load_env_config().client_kwargs()
        options.update(kwargs)
        return cls(**options)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "ScalrClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def url_for(self, path: str) -> str:
        return self.base_url + path.lstrip("/")

    async def execute(self, descriptor: RequestDescriptor) -> httpx.Response:
        """
        Send one request.
        - Returns the raw response on 2xx
        - Raises a normalized ScalrHTTPError subclass on any other status
        - Raises UnexpectedResponseError (status_code=None) on transport failure
        Cancellation and timeouts come from the caller / httpx and are not retried.
        """
        url = self.url_for(descriptor.path)
        headers = dict(self.headers)
        if descriptor.json is not None:
            headers["Content-Type"] = JSONAPI_MEDIA_TYPE

        start = time.perf_counter()
        try:
            resp = await self.http.request(
                descriptor.method,
                url,
                params=descriptor.params or None,
                json=descriptor.json,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise UnexpectedResponseError(
                status_code=None,
                method=descriptor.method,
                url=url,
                message=f"transport error: {exc}",
            ) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        self.log.debug(
            "scalr.request",
            extra={
                "method": descriptor.method,
                "path": descriptor.path,
                "status": resp.status_code,
                "duration_ms": duration_ms,
            },
        )

        try:
            check_response(resp)
        except ScalrHTTPError as error:
            log_event(
                "scalr.api_error",
                level=logging.WARNING,
                error=error,
                path=descriptor.path,
                duration_ms=duration_ms,
            )
            raise

        return resp
