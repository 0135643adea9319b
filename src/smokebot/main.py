"""SmokeBot entry point — reads the workflow event and answers /smoke invocations."""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

from .commands import extract_command_name, is_triggered
from .config import load_config
from .errors import SmokeBotError
from .events import ActionInputs, build_smoke_reply, comment_body, parse_inputs, resolve_reply_facts
from .github_client import GitHubClient
from .payload import resolve_payload

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [smokebot] %(levelname)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger(__name__)

EVENT_PAYLOAD_LABEL = "inputs.eventPayload"


def _load_event() -> dict:
    event_path = os.environ.get("GITHUB_EVENT_PATH")
    if not event_path:
        raise SystemExit("GITHUB_EVENT_PATH not set — is this running inside a GitHub Action?")
    return json.loads(Path(event_path).read_text())


def handle_invocation(inputs: ActionInputs, gh: GitHubClient) -> bool:
    """Reply to the triggering comment if this run is a /smoke invocation.

    Returns:
        True if a reply was posted, False if the event is not a /smoke invocation.
    """
    payload = resolve_payload(inputs.event_payload, EVENT_PAYLOAD_LABEL)
    command = extract_command_name(inputs.command)

    if not is_triggered(command, comment_body(payload)):
        logger.info("Not a /smoke invocation (command=%r) — nothing to do", command)
        return False

    # Resolve everything before touching the network
    facts = resolve_reply_facts(payload)
    gh.post_comment(facts.owner, facts.repo, facts.issue_number, build_smoke_reply(facts))
    logger.info(
        "Replied with smoke ok on %s/%s#%s (trigger comment id: %s)",
        facts.owner,
        facts.repo,
        facts.issue_number,
        facts.comment_id,
    )
    return True


def main() -> None:
    raw_event = _load_event()
    config = load_config()

    try:
        inputs = parse_inputs(raw_event)
        with GitHubClient(
            inputs.auth_token,
            api_url=config.github.api_url,
            timeout=config.github.timeout,
            user_agent=config.github.user_agent,
        ) as gh:
            handle_invocation(inputs, gh)
    except SmokeBotError as e:
        logger.error("%s: %s", type(e).__name__, e)
        sys.exit(1)


if __name__ == "__main__":
    main()
