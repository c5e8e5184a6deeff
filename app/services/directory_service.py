# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Directory pipeline (fetch, filter, sort).
Produces the MemberList handed to the page renderer.
"""

from typing import Iterable

from app.core.logging import get_logger
from app.models.domain import Member, MemberList
from app.services.slack_client import SlackClient

logger = get_logger(__name__)


def is_listed(member: Member, email_filter: str) -> bool:
    """
    Active humans whose e-mail ends with `email_filter`.
    Plain suffix test: "tink.se" also matches "a@nottink.se".
    """
    return (
        not member.deleted
        and not member.is_bot
        and member.profile.email.endswith(email_filter)
    )


def filter_members(members: Iterable[Member], email_filter: str = "") -> list[Member]:
    return [m for m in members if is_listed(m, email_filter)]


def sort_members(members: Iterable[Member]) -> list[Member]:
    """Stable sort on lower-cased real name; empty names come first."""
    return sorted(members, key=lambda m: m.profile.real_name.lower())


class DirectoryService:
    """Builds the directory shown on the index page."""

    def __init__(self, slack_client: SlackClient, email_filter: str = "") -> None:
        self._slack = slack_client
        self._email_filter = email_filter

    def build_directory(self) -> MemberList:
        """Fetch the workspace and return the listed members, sorted."""
        fetched = self._slack.list_members()
        members = sort_members(filter_members(fetched.members, self._email_filter))
        logger.info(
            "Directory built: team=%s, fetched=%d, listed=%d",
            fetched.team,
            len(fetched.members),
            len(members),
        )
        return MemberList(team=fetched.team, members=members)
