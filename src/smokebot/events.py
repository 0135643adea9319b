"""Workflow event parsing — pulls the action inputs and reply facts out of raw JSON."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .errors import InputError, ResolutionError


@dataclass
class ActionInputs:
    """The ``inputs`` block of the workflow event that started this run.

    Attributes:
        auth_token:     Token used to post the reply comment.
        event_payload:  The forwarded event, JSON or base64+compressed JSON.
        command:        The raw command, a string, an object or absent.
    """

    auth_token: str
    event_payload: Any = None
    command: Any = None


@dataclass
class ReplyFacts:
    """Where the acknowledgement goes and which comment triggered it.

    Attributes:
        owner:         Repository owner login.
        repo:          Repository name.
        issue_number:  Number of the issue or pull request thread.
        comment_id:    Id of the comment that triggered the run.
    """

    owner: str
    repo: str
    issue_number: int
    comment_id: int


def parse_inputs(event: dict) -> ActionInputs:
    """Parse the ``inputs`` of a workflow event into ActionInputs.

    Raises:
        InputError: if ``inputs.authToken`` is missing or blank.
    """
    inputs = event.get("inputs") or {}
    auth_token = inputs.get("authToken")
    if not isinstance(auth_token, str) or not auth_token.strip():
        raise InputError("Missing inputs.authToken")

    return ActionInputs(
        auth_token=auth_token,
        event_payload=inputs.get("eventPayload"),
        command=inputs.get("command"),
    )


def _dig(payload: Any, *path: str) -> Any:
    """Follow ``path`` through nested dicts, returning None at the first gap."""
    node = payload
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _full_name_part(payload: Any, index: int) -> Optional[str]:
    full_name = _dig(payload, "repository", "full_name")
    if not isinstance(full_name, str):
        return None
    parts = full_name.split("/")
    return parts[index] if index < len(parts) else None


def comment_body(payload: Any) -> str:
    """Return the text of the triggering comment, or "" if there is none."""
    body = _dig(payload, "comment", "body")
    return str(body) if body else ""


def resolve_reply_facts(payload: Any) -> ReplyFacts:
    """Derive owner, repo, issue number and comment id from an event payload.

    Owner and repo come from ``repository.owner.login`` and
    ``repository.name``, falling back to splitting ``repository.full_name``.

    Raises:
        ResolutionError: if any of the four facts is missing or empty.
    """
    owner = _dig(payload, "repository", "owner", "login") or _full_name_part(payload, 0)
    repo = _dig(payload, "repository", "name") or _full_name_part(payload, 1)
    issue_number = _dig(payload, "issue", "number")
    comment_id = _dig(payload, "comment", "id")

    if not owner or not repo or not issue_number or not comment_id:
        raise ResolutionError(
            "Could not resolve repository owner/name/issue number/comment id from event payload"
        )

    return ReplyFacts(owner=owner, repo=repo, issue_number=issue_number, comment_id=comment_id)


def build_smoke_reply(facts: ReplyFacts) -> str:
    """Build the acknowledgement comment posted for a /smoke invocation."""
    return "\n".join(
        [
            "smoke ok",
            f"repo: {facts.owner}/{facts.repo}",
            f"issue: {facts.issue_number}",
            f"comment: {facts.comment_id}",
        ]
    )
