"""
Client du formulaire de contact : validation locale puis POST JSON sur /api/contact
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import requests

logger = logging.getLogger(__name__)

MSG_FILL_ALL = "Please fill all fields."
MSG_SENT = "Message sent - thank you!"
MSG_FAILED = "Failed to send message."
MSG_NETWORK = "Network error - try again later."


def log_error(exc: BaseException) -> None:
    logger.error(f"❌ Contact submit error: {exc}")


@dataclass
class ContactFormState:
    """Valeurs saisies dans le formulaire"""

    name: str = ""
    email: str = ""
    message: str = ""

    def cleaned(self) -> dict:
        return {
            "name": (self.name or "").strip(),
            "email": (self.email or "").strip(),
            "message": (self.message or "").strip(),
        }

    def reset(self):
        self.name = ""
        self.email = ""
        self.message = ""


@dataclass
class FormOutcome:
    message: str
    sent: bool = False


class ContactFormClient:

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
        on_error: Callable[[BaseException], None] = log_error,
    ):
        self.endpoint = base_url.rstrip("/") + "/api/contact"
        self.session = session or requests.Session()
        self.timeout = timeout
        self.on_error = on_error

    def submit(self, state: ContactFormState) -> FormOutcome:
        """
        Envoie le formulaire. En cas de succès le formulaire est vidé,
        sinon les valeurs restent en place pour un nouvel essai.
        """
        data = state.cleaned()
        if not all(data.values()):
            return FormOutcome(MSG_FILL_ALL)

        try:
            res = self.session.post(self.endpoint, json=data, timeout=self.timeout)
        except requests.RequestException as e:
            self.on_error(e)
            return FormOutcome(MSG_NETWORK)

        try:
            body = res.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if res.ok:
            state.reset()
            return FormOutcome(body.get("message") or MSG_SENT, sent=True)

        return FormOutcome(body.get("message") or MSG_FAILED)
