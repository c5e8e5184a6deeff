# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Slack client. Fetches and decodes the workspace member list.
One blocking GET per call, no retry, httpx default timeout.
"""

import httpx
from pydantic import ValidationError

from app.core.exceptions import DirectoryFetchError, DirectoryParseError
from app.core.logging import get_logger
from app.metrics.prometheus import DIRECTORY_FETCHES
from app.models.domain import MemberList

logger = get_logger(__name__)

USERS_LIST_PATH = "/users.list"


class SlackClient:
    """Reads users.list for one workspace."""

    def __init__(self, api_url: str, token: str, team: str) -> None:
        self._api_url = api_url.rstrip("/")
        self._token = token
        self._team = team

    def _redact(self, text: str) -> str:
        if not self._token:
            return text
        return text.replace(self._token, "***")

    def list_members(self) -> MemberList:
        """
        Return the full member list, unfiltered, in upstream order.
        Raises DirectoryFetchError on transport, HTTP or Slack-level errors,
        DirectoryParseError when the body is not a member list.
        """
        try:
            with httpx.Client() as client:
                resp = client.get(
                    f"{self._api_url}{USERS_LIST_PATH}",
                    params={"token": self._token},
                )
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            DIRECTORY_FETCHES.labels(outcome="http_error").inc()
            status = exc.response.status_code
            raise DirectoryFetchError(
                f"Slack API returned HTTP {status}", status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            DIRECTORY_FETCHES.labels(outcome="transport_error").inc()
            raise DirectoryFetchError(
                self._redact(str(exc) or type(exc).__name__)
            ) from exc

        try:
            member_list = MemberList.model_validate_json(resp.content)
        except ValidationError as exc:
            DIRECTORY_FETCHES.labels(outcome="parse_error").inc()
            first = exc.errors()[0]
            where = ".".join(str(p) for p in first.get("loc", ())) or "body"
            raise DirectoryParseError(
                f"Invalid users.list response at {where}: {first['msg']}"
            ) from exc

        if not member_list.ok:
            DIRECTORY_FETCHES.labels(outcome="api_error").inc()
            raise DirectoryFetchError(
                f"Slack API error: {member_list.error or 'unknown_error'}",
                status_code=resp.status_code,
            )

        DIRECTORY_FETCHES.labels(outcome="ok").inc()
        member_list.team = self._team
        logger.debug("users.list returned %d members", len(member_list.members))
        return member_list
