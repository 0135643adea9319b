"""Error types raised by SmokeBot. Every one of them is fatal to the run."""

from __future__ import annotations

from typing import Optional


class SmokeBotError(Exception):
    """Base class for all SmokeBot failures."""


class InputError(SmokeBotError):
    """A required input is missing, or a payload could not be parsed at all."""


class DecodeError(SmokeBotError):
    def __init__(self, message: str, attempts: list[tuple[str, str]]) -> None:
        """
        Args:
            message: Aggregated human-readable message.
            attempts: (codec name, error text) for every codec tried, in order.
        """
        super().__init__(message)
        self.attempts = attempts


class ResolutionError(SmokeBotError):
    """The event payload lacks a fact needed to post the reply."""


class TransportError(SmokeBotError):
    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
