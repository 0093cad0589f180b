"""
Meddelanden till användaren (toasts)
"""

import logging
from typing import List

import streamlit as st

from models import Notification, Severity

logger = logging.getLogger(__name__)

SEVERITY_ICONS = {
    Severity.INFO: "ℹ️",
    Severity.SUCCESS: "✅",
    Severity.ERROR: "🚨",
}

class Notifier:
    """Basklass för mottagare av meddelanden"""

    def notify(self, notification: Notification) -> None:
        raise NotImplementedError

class StreamlitNotifier(Notifier):
    """
    Köar meddelanden i sessionen och visar dem som st.toast

    Kön töms i slutet av varje körning av skriptet så att meddelanden
    som skapas före st.rerun() ändå visas.
    """

    def __init__(self):
        self.pending: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        log = logger.warning if notification.severity == Severity.ERROR else logger.info
        log("%s: %s", notification.title, notification.description)
        self.pending.append(notification)

    def flush(self) -> int:
        """Visa alla köade meddelanden, returnerar antalet"""
        shown = 0
        while self.pending:
            notification = self.pending.pop(0)
            body = f"**{notification.title}**"
            if notification.description:
                body += f"\n\n{notification.description}"
            st.toast(body, icon=SEVERITY_ICONS.get(notification.severity))
            shown += 1
        return shown
