"""Kubeconfig document model.

Only the parts of a kubeconfig that ctx understands are modelled:
- apiVersion / kind: metadata, always "v1" / "Config" unless set in code
- current-context: name of the active context (may be empty)
- preferences: opaque mapping, only its presence matters
- contexts: ordered list of cluster/user/namespace bindings
- clusters, users: ordered lists carried through for serialization
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_API_VERSION = "v1"
DEFAULT_KIND = "Config"


class Context(BaseModel):
    """A named binding of cluster, user and optional namespace."""

    name: str
    cluster: str = ""
    user: str = ""
    namespace: str = Field(default="", description="Empty when not set")


class Cluster(BaseModel):
    """A cluster entry. Only `name` and `server` are written back."""

    model_config = {"populate_by_name": True}

    name: str
    server: str = ""
    certificate_authority: str | None = Field(
        default=None, alias="certificate-authority"
    )
    certificate_authority_data: str | None = Field(
        default=None, alias="certificate-authority-data"
    )


class User(BaseModel):
    """A user entry. Auth fields are opaque and never written back."""

    name: str
    auth: dict[str, str] = Field(default_factory=dict)


class Config(BaseModel):
    """Root kubeconfig document."""

    model_config = {"populate_by_name": True}

    api_version: str = Field(default=DEFAULT_API_VERSION, alias="apiVersion")
    kind: str = DEFAULT_KIND
    current_context: str = Field(default="", alias="current-context")
    preferences: dict[str, str] = Field(default_factory=dict)
    contexts: list[Context] = Field(default_factory=list)
    clusters: list[Cluster] = Field(default_factory=list)
    users: list[User] = Field(default_factory=list)
