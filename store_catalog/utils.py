"""
Design (utils.py)
- Purpose: Reusable helpers: case folding, yes/no answers, desktop notifications.
- Inputs: Various helper parameters (text, answers, notification title/message).
- Outputs: Helper results (strings, bools).
- Side effects: notify_desktop shows an OS notification through plyer.
"""

import logging

from plyer import notification

from .config import NOTIFY_TIMEOUT_SEC

LOGGER = logging.getLogger(__name__)


def fold(text: str) -> str:
    """Case-fold for keyword and name comparisons (plain lower(), not locale-aware)."""
    return text.lower()


def is_yes(answer: str | None) -> bool:
    """
    Purpose: Interpret a Y/N prompt answer.
    Inputs: raw answer (None when input ended).
    Outputs: True only for "y"/"Y".
    """
    if answer is None:
        return False
    return answer.lower() == "y"


def notify_desktop(title: str, message: str) -> bool:
    """
    Purpose: Show a desktop notification.
    Outputs: True if the backend accepted it, else False.
    Side Effects: Calls plyer; a missing backend (headless box, no dbus) is only logged.
    """
    try:
        notification.notify(title=title, message=message, timeout=NOTIFY_TIMEOUT_SEC)
        return True
    except Exception as exc:
        LOGGER.debug("Desktop notification unavailable: %s", exc)
        return False
