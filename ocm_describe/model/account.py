"""Account management models."""

from typing import Optional

from pydantic import BaseModel, Field

from .cluster import ObjectReference


class Organization(BaseModel):
    id: str = ""
    name: str = ""


class Subscription(BaseModel):
    """Subscription owning a cluster."""

    id: str = ""
    creator: ObjectReference = Field(default_factory=ObjectReference)
    status: Optional[str] = None


class Account(BaseModel):
    """User account that created a subscription."""

    id: str = ""
    username: str = ""
    email: str = ""
    organization: Optional[Organization] = None
