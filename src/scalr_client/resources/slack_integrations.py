from __future__ import annotations

from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from pydantic import Field

from ..errors import OptionsValidationError
from ..models import (
    Account,
    ListOptions,
    Resource,
    ResourceOptions,
    Workspace,
    open_enum,
)
from ..pagination import Page
from ..request import build_request, resource_path
from ..response import decode_many, decode_one
from ..service import ResourceService
from ..validation import require_name, require_ref
from .environments import Environment


class SlackEvent(str, Enum):
    RUN_APPROVAL_REQUIRED = "run_approval_required"
    RUN_SUCCESS = "run_success"
    RUN_ERRORED = "run_errored"


class SlackStatus(str, Enum):
    ACTIVE = "active"
    DISABLED = "disabled"


# Decoded values the enums above do not know yet stay plain strings.
EventValue = open_enum(SlackEvent)
StatusValue = open_enum(SlackStatus)


class SlackConnection(Resource):
    resource_type: ClassVar[str] = "slack-connections"

    slack_workspace_name: Optional[str] = None

    account: Optional[Account] = None


class SlackChannel(Resource):
    resource_type: ClassVar[str] = "slack-channels"

    name: Optional[str] = None
    is_private: Optional[bool] = None


class SlackIntegration(Resource):
    resource_type: ClassVar[str] = "slack-integrations"

    name: Optional[str] = None
    status: Optional[StatusValue] = None
    channel_id: Optional[str] = None
    events: Tuple[EventValue, ...] = ()

    account: Optional[Account] = None
    environment: Optional[Environment] = None
    workspaces: Tuple[Workspace, ...] = ()


class SlackIntegrationCreateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "slack-integrations"

    name: Optional[str] = None
    channel_id: Optional[str] = None
    events: Optional[List[SlackEvent]] = None

    account: Optional[Account] = None
    connection: Optional[SlackConnection] = None
    environment: Optional[Environment] = None
    workspaces: Optional[List[Workspace]] = None

    def check(self) -> None:
        require_name(self.name)
        require_name(self.channel_id, field="channel id")
        if not self.events:
            raise OptionsValidationError("at least one event must be provided")
        require_ref(self.account, field="account")
        require_ref(self.connection, field="connection", required=False)
        require_ref(self.environment, field="environment")


class SlackIntegrationUpdateOptions(ResourceOptions):
    resource_type: ClassVar[str] = "slack-integrations"

    name: Optional[str] = None
    channel_id: Optional[str] = None
    status: Optional[SlackStatus] = None
    events: Optional[List[SlackEvent]] = None

    environment: Optional[Environment] = None
    workspaces: Optional[List[Workspace]] = None


class SlackIntegrationListOptions(ListOptions):
    account: Optional[str] = Field(default=None, alias="filter[account]")


class SlackChannelListOptions(ListOptions):
    query: Optional[str] = None


class SlackIntegrations(
    ResourceService[
        SlackIntegration,
        SlackIntegrationCreateOptions,
        SlackIntegrationUpdateOptions,
        SlackIntegrationListOptions,
    ]
):
    path = "integrations/slack"
    model = SlackIntegration
    kind = "slack integration"
    list_options = SlackIntegrationListOptions

    def _connection_path(self, account_id: str) -> str:
        self._require_id(account_id, kind="account")
        return f"{self.path}/{resource_path(account_id)}/connection"

    async def get_connection(self, account_id: str) -> SlackConnection:
        """The account's Slack workspace connection."""
        resp = await self.client.execute(
            build_request("GET", self._connection_path(account_id))
        )
        return decode_one(resp, SlackConnection)

    async def get_channels(
        self, account_id: str, options: Optional[SlackChannelListOptions] = None
    ) -> Page[SlackChannel]:
        """Channels visible through the account's Slack connection."""
        path = f"{self._connection_path(account_id)}/channels"
        resp = await self.client.execute(build_request("GET", path, options))
        requested = options.page_number if options is not None else None
        return decode_many(resp, SlackChannel, requested)
