"""
Resource schemas and their services.

Each module declares entity/options models as data and a service class that
inherits the shared request/decode pipeline from scalr_client.service.
"""

from .access_policies import (
    AccessPolicies,
    AccessPolicy,
    AccessPolicyCreateOptions,
    AccessPolicyListOptions,
    AccessPolicyUpdateOptions,
)
from .agent_pools import (
    AgentPool,
    AgentPoolCreateOptions,
    AgentPoolListOptions,
    AgentPools,
    AgentPoolUpdateOptions,
)
from .environments import (
    Environment,
    EnvironmentCreateOptions,
    EnvironmentListOptions,
    Environments,
    EnvironmentUpdateOptions,
)
from .policy_groups import (
    Policy,
    PolicyEnforcementLevel,
    PolicyGroup,
    PolicyGroupCreateOptions,
    PolicyGroupEnvironmentDeleteOptions,
    PolicyGroupEnvironments,
    PolicyGroupEnvironmentsCreateOptions,
    PolicyGroupListOptions,
    PolicyGroups,
    PolicyGroupStatus,
    PolicyGroupUpdateOptions,
    PolicyGroupVCSRepo,
    PolicyGroupVCSRepoOptions,
)
from .roles import Role, RoleCreateOptions, RoleListOptions, Roles, RoleUpdateOptions
from .slack_integrations import (
    SlackChannel,
    SlackChannelListOptions,
    SlackConnection,
    SlackEvent,
    SlackIntegration,
    SlackIntegrationCreateOptions,
    SlackIntegrationListOptions,
    SlackIntegrations,
    SlackIntegrationUpdateOptions,
    SlackStatus,
)
from .tags import Tag, TagCreateOptions, TagListOptions, Tags, TagUpdateOptions
from .teams import Team, TeamCreateOptions, TeamListOptions, Teams, TeamUpdateOptions
from .vcs_revisions import VcsRevision, VcsRevisions

__all__ = [
    # Access policies
    "AccessPolicies",
    "AccessPolicy",
    "AccessPolicyCreateOptions",
    "AccessPolicyListOptions",
    "AccessPolicyUpdateOptions",
    # Agent pools
    "AgentPool",
    "AgentPoolCreateOptions",
    "AgentPoolListOptions",
    "AgentPools",
    "AgentPoolUpdateOptions",
    # Environments
    "Environment",
    "EnvironmentCreateOptions",
    "EnvironmentListOptions",
    "Environments",
    "EnvironmentUpdateOptions",
    # Policy groups
    "Policy",
    "PolicyEnforcementLevel",
    "PolicyGroup",
    "PolicyGroupCreateOptions",
    "PolicyGroupEnvironmentDeleteOptions",
    "PolicyGroupEnvironments",
    "PolicyGroupEnvironmentsCreateOptions",
    "PolicyGroupListOptions",
    "PolicyGroups",
    "PolicyGroupStatus",
    "PolicyGroupUpdateOptions",
    "PolicyGroupVCSRepo",
    "PolicyGroupVCSRepoOptions",
    # Roles
    "Role",
    "RoleCreateOptions",
    "RoleListOptions",
    "Roles",
    "RoleUpdateOptions",
    # Slack integrations
    "SlackChannel",
    "SlackChannelListOptions",
    "SlackConnection",
    "SlackEvent",
    "SlackIntegration",
    "SlackIntegrationCreateOptions",
    "SlackIntegrationListOptions",
    "SlackIntegrations",
    "SlackIntegrationUpdateOptions",
    "SlackStatus",
    # Tags
    "Tag",
    "TagCreateOptions",
    "TagListOptions",
    "Tags",
    "TagUpdateOptions",
    # Teams
    "Team",
    "TeamCreateOptions",
    "TeamListOptions",
    "Teams",
    "TeamUpdateOptions",
    # VCS revisions
    "VcsRevision",
    "VcsRevisions",
]
