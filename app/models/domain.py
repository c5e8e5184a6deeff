# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: the slice of the Slack users.list payload the page needs.
Field names follow the wire format; missing or null fields decode to empty values.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Profile(BaseModel):
    """Personal and display fields of a Slack user."""

    model_config = ConfigDict(extra="ignore")

    first_name: str = ""
    last_name: str = ""
    real_name: str = ""
    title: str = ""
    image_192: str = Field(default="", description="Avatar URL")
    phone: str = ""
    email: str = ""
    status_text: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        return "" if v is None else v


class Member(BaseModel):
    """A single directory entry. Identity is `id`."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    id: str = ""
    team_id: str = ""
    is_bot: bool = False
    deleted: bool = False
    profile: Profile = Field(default_factory=Profile)

    @field_validator("name", "id", "team_id", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("is_bot", "deleted", mode="before")
    @classmethod
    def null_to_false(cls, v):
        return False if v is None else v

    @field_validator("profile", mode="before")
    @classmethod
    def null_to_blank_profile(cls, v):
        return {} if v is None else v

    @property
    def display_name(self) -> str:
        return self.profile.real_name or self.name

    @property
    def deep_link(self) -> str:
        """slack:// URI opening the native client on this user."""
        return f"slack://user?team={self.team_id}&id={self.id}"


class MemberList(BaseModel):
    """users.list envelope plus the team the directory is rendered for."""

    model_config = ConfigDict(extra="ignore")

    ok: bool = True
    error: Optional[str] = None
    team: str = ""
    members: list[Member] = Field(default_factory=list)

    @field_validator("members", mode="before")
    @classmethod
    def null_to_empty_list(cls, v):
        return [] if v is None else v
