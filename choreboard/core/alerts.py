"""
Alert headers attached to REST responses so clients can display notifications.
"""

from __future__ import annotations

from typing import Dict

from .config import get_settings


def _prefix() -> str:
    return f"X-{get_settings().app_name}"


def alert_header_names() -> list[str]:
    """Header names a browser client must be allowed to read (CORS expose list)."""
    prefix = _prefix()
    return [f"{prefix}-alert", f"{prefix}-error", f"{prefix}-params"]


def create_alert(message: str, param: str) -> Dict[str, str]:
    prefix = _prefix()
    return {f"{prefix}-alert": message, f"{prefix}-params": param}


def entity_creation_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"A new {entity_name} is created with identifier {param}", param)


def entity_update_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"A {entity_name} is updated with identifier {param}", param)


def entity_deletion_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"A {entity_name} is deleted with identifier {param}", param)


def failure_alert(entity_name: str, error_key: str) -> Dict[str, str]:
    """Headers describing a rejected request; the message itself travels in the body."""
    prefix = _prefix()
    return {f"{prefix}-error": f"error.{error_key}", f"{prefix}-params": entity_name}
