"""
Lecture des documents de contenu JSON (about, team, services, projects, software)
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Optional

from flask import current_app

from utils.errors import ContentUnavailable

logger = logging.getLogger(__name__)

_RESOURCE_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class ContentManager:
    """
    Accès en lecture seule au dossier de contenu.
    Aucun cache : le fichier est relu à chaque appel.
    """

    def __init__(self, content_dir: Optional[Path] = None):
        self._content_dir = Path(content_dir) if content_dir else None

    def init_app(self, app):
        app.extensions["content_manager"] = self

    @property
    def content_dir(self) -> Path:
        if self._content_dir is not None:
            return self._content_dir
        return Path(current_app.config["CONTENT_DIR"])

    def path_for(self, resource: str) -> Path:
        if not _RESOURCE_RE.match(resource or ""):
            raise ContentUnavailable(resource, "invalid resource name")
        return self.content_dir / f"{resource}.json"

    # ================================
    # Lecture
    # ================================
    def load(self, resource: str) -> Any:
        """Retourne le document tel quel, ou lève ContentUnavailable"""
        path = self.path_for(resource)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            raise ContentUnavailable(resource, f"{path.name} introuvable")
        except (OSError, ValueError) as e:
            raise ContentUnavailable(resource, str(e))


# Instance globale
content_manager = ContentManager()
