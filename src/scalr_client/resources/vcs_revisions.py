from __future__ import annotations

from typing import ClassVar, Optional

from ..models import Resource
from ..service import Readable


class VcsRevision(Resource):
    resource_type: ClassVar[str] = "vcs-revisions"

    branch: Optional[str] = None
    commit_sha: Optional[str] = None
    commit_message: Optional[str] = None
    sender_username: Optional[str] = None


class VcsRevisions(Readable[VcsRevision]):
    """VCS metadata is read-only."""

    path = "vcs-revisions"
    model = VcsRevision
    kind = "vcs revision"
