"""Shared context objects for the create flow."""
from __future__ import annotations

from dataclasses import dataclass

from gemini_client import GeminiGateway
from session_proxy import PressSessionProxy
from wizard import WizardPosition


@dataclass(slots=True)
class CreatePageContext:
    session: PressSessionProxy
    gateway: GeminiGateway
    position: WizardPosition


__all__ = ["CreatePageContext"]
