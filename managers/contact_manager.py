import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional

from flask import current_app

from utils.errors import ContactValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "message")


def utc_timestamp() -> str:
    """Horodatage ISO-8601 UTC à la milliseconde, suffixe Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ContactManager:
    """
    Journal des messages de contact : un seul fichier JSON contenant un tableau,
    ordre d'insertion = ordre de soumission.
    """

    def __init__(self, log_file: Optional[Path] = None):
        self.lock = Lock()
        self._log_file = Path(log_file) if log_file else None

    def init_app(self, app):
        app.extensions["contact_manager"] = self

    @property
    def log_file(self) -> Path:
        if self._log_file is not None:
            return self._log_file
        return Path(current_app.config["CONTACT_LOG_FILE"])

    # =======================================
    # Validation
    # =======================================
    @staticmethod
    def validate(data: Any) -> Dict[str, str]:
        """
        Les trois champs doivent être présents et non vides.
        Pas de trim côté serveur : "  " est accepté.
        """
        if not isinstance(data, dict):
            data = {}

        missing = [
            field for field in REQUIRED_FIELDS
            if not data.get(field) or not isinstance(data.get(field), str)
        ]
        if missing:
            raise ContactValidationError(missing)

        return {field: data[field] for field in REQUIRED_FIELDS}

    # =======================================
    # Lecture tolérante
    # =======================================
    def _load(self, path: Path) -> List[dict]:
        """Toute erreur de lecture/parsing = journal vide"""
        try:
            with open(path, "r", encoding="utf-8") as f:
                entries = json.load(f)
        except (OSError, ValueError) as e:
            # fichier vide fraîchement créé : cas normal
            if path.exists() and path.stat().st_size > 0:
                logger.warning(f"⚠️ Journal contact illisible, repart de zéro: {e}")
            return []

        if not isinstance(entries, list):
            logger.warning("⚠️ Journal contact n'est pas un tableau, repart de zéro")
            return []
        return entries

    # =======================================
    # Ajout d'un message
    # =======================================
    def append(self, data: Any) -> dict:
        """Valide puis ajoute un message horodaté au journal"""
        fields = self.validate(data)
        entry = {**fields, "ts": utc_timestamp()}

        path = self.log_file
        with self.lock:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)

            entries = self._load(path)
            entries.append(entry)

            with open(path, "w", encoding="utf-8") as f:
                json.dump(entries, f, ensure_ascii=False, indent=2)

        logger.info(f"📨 Message de contact enregistré ({len(entries)} au total)")
        return entry


# Instance globale
contact_manager = ContactManager()
