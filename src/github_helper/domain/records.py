"""GitHub API records decoded from response bodies.

Only the fields the helper uses are declared; anything else GitHub sends is
ignored by pydantic's default ``extra`` policy.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# ── Users ───────────────────────────────────────────────────────────────────


class BasicUser(BaseModel):
    """Minimal user reference embedded in most GitHub payloads."""

    login: str
    url: str | None = None


class FullUser(BasicUser):
    """``GET /user`` and ``GET /users/{username}``."""

    id: int | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    bio: str | None = None
    html_url: str | None = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    created_at: str | None = None


# ── Repositories ────────────────────────────────────────────────────────────


class License(BaseModel):
    key: str
    name: str
    spdx_id: str | None = None
    url: str | None = None


class UserPermissions(BaseModel):
    """Permissions of the authenticated user on a repository."""

    admin: bool = False
    push: bool = False
    pull: bool = False


class BasicRepository(BaseModel):
    owner: BasicUser
    name: str
    description: str | None = None


class FullRepository(BasicRepository):
    """Repository as returned by the ``/repos`` and ``/user(s)/.../repos`` endpoints."""

    id: int | None = None
    full_name: str | None = None
    private: bool = False
    fork: bool = False
    html_url: str | None = None
    language: str | None = None
    default_branch: str | None = None
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    license: License | None = None
    permissions: UserPermissions | None = None
    created_at: str | None = None
    updated_at: str | None = None
    pushed_at: str | None = None


class CreateRepositoryRequest(BaseModel):
    """Body of ``POST /user/repos``."""

    name: str
    description: str = ""
    private: bool = False


# ── Branches & commits ──────────────────────────────────────────────────────


class BasicCommit(BaseModel):
    """Commit reference: sha plus the API URL of the full commit."""

    sha: str
    url: str


class Branch(BaseModel):
    name: str
    commit: BasicCommit
    protected: bool = False


class CommitPerson(BaseModel):
    """Git-level author / committer signature."""

    name: str | None = None
    email: str | None = None
    date: str | None = None


class CommitDetails(BaseModel):
    message: str = ""
    author: CommitPerson | None = None
    committer: CommitPerson | None = None
    comment_count: int = 0


class Commit(BaseModel):
    """Commit as returned by the ``/commits`` endpoints."""

    sha: str
    url: str | None = None
    commit: CommitDetails
    author: BasicUser | None = None
    committer: BasicUser | None = None
    parents: list[BasicCommit] = Field(default_factory=list)
