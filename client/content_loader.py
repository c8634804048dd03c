"""
Chargement des documents de contenu et rendu des fragments HTML de chaque section.

Deux modes :
  - HTTP : GET <base_url>/data/<key>.json via requests (client headless, scripts)
  - local : une fonction fetch(key) fournie par l'appelant (pages rendues côté serveur)

Politique "ne jamais casser la page" : un document absent ou invalide renvoie None
et sa section reste vide, les autres sections sont rendues normalement.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, Optional

import requests
from markupsafe import Markup, escape

logger = logging.getLogger(__name__)

CONTENT_KEYS = ("about", "software", "services", "projects", "team")

TEAM_PHOTO_DIR = "assets/images/team"
NO_TEAM_MESSAGE = "<p>No team data available.</p>"


def log_warning(key: str, exc: BaseException) -> None:
    logger.warning(f"⚠️ Chargement contenu '{key}' échoué: {exc}")


# ============================================================
# RENDUS PAR TYPE
# ============================================================

def render_about(about: dict) -> Dict[str, Markup]:
    full = about.get("full")
    return {
        "about-text": escape(about.get("summary") or ""),
        "about-full": Markup("<p>{}</p>").format(full) if full else Markup(""),
    }


def render_software(software: dict) -> Dict[str, Markup]:
    item = Markup('<div class="software-item"><h3>{}</h3><p>{}</p></div>')
    tools = software.get("tools") or []
    return {
        "software-list": Markup("").join(item.format(t.get("name", ""), t.get("desc", "")) for t in tools),
    }


def render_services(services: dict) -> Dict[str, Markup]:
    item = Markup("<h3>{}</h3><p>{}</p>")
    entries = services.get("list") or []
    return {
        "services-full": Markup("").join(item.format(s.get("title", ""), s.get("text", "")) for s in entries),
    }


def render_projects(projects: list) -> Dict[str, Markup]:
    item = Markup("<article><h3>{}</h3><p>{}</p></article>")
    return {
        "projects-list": Markup("").join(item.format(p.get("title", ""), p.get("summary", "")) for p in projects or []),
    }


def render_team_card(member: dict) -> Markup:
    return Markup(
        '<article class="team-card">'
        '<div class="team-photo"><img src="{photo_dir}/{photo}" alt="{name}"/></div>'
        '<h3 class="team-name">{name}</h3>'
        '<div class="team-role">{role}</div>'
        '<p class="team-bio">{bio}</p>'
        '</article>'
    ).format(
        photo_dir=TEAM_PHOTO_DIR,
        photo=member.get("photo", ""),
        name=member.get("name", ""),
        role=member.get("role", ""),
        bio=member.get("bio", ""),
    )


def render_team(team: list) -> Dict[str, Markup]:
    item = Markup("<div><strong>{}</strong> - {}<p>{}</p></div>")
    members = team or []
    if members:
        grid = Markup("").join(render_team_card(m) for m in members)
    else:
        grid = Markup(NO_TEAM_MESSAGE)
    return {
        "team-list": Markup("").join(item.format(m.get("name", ""), m.get("role", ""), m.get("bio", "")) for m in members),
        "team-grid": grid,
    }


RENDERERS: Dict[str, Callable[[Any], Dict[str, Markup]]] = {
    "about": render_about,
    "software": render_software,
    "services": render_services,
    "projects": render_projects,
    "team": render_team,
}


# ============================================================
# LOADER
# ============================================================

class ContentLoader:
    """Charge chaque document indépendamment et produit les fragments par section"""

    def __init__(
        self,
        fetch: Optional[Callable[[str], Any]] = None,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 5,
        on_error: Callable[[str, BaseException], None] = log_warning,
    ):
        if fetch is None and base_url is None:
            raise ValueError("fetch ou base_url requis")
        self.fetch = fetch
        self.base_url = base_url.rstrip("/") if base_url else None
        self.session = session or requests.Session()
        self.timeout = timeout
        self.on_error = on_error

    def _fetch_http(self, key: str) -> Any:
        res = self.session.get(f"{self.base_url}/data/{key}.json", timeout=self.timeout)
        if not res.ok:
            return None
        return res.json()

    def load_json(self, key: str) -> Optional[Any]:
        """Document parsé, ou None si indisponible (jamais d'exception)"""
        try:
            if self.fetch is not None:
                return self.fetch(key)
            return self._fetch_http(key)
        except Exception as e:
            self.on_error(key, e)
            return None

    def load_all(self, keys: Iterable[str] = CONTENT_KEYS) -> Dict[str, Optional[Any]]:
        """Les requêtes partent en parallèle, aucune dépendance d'ordre"""
        keys = list(keys)
        if not keys:
            return {}
        with ThreadPoolExecutor(max_workers=len(keys)) as pool:
            results = pool.map(self.load_json, keys)
            return dict(zip(keys, results))

    def render(self, documents: Dict[str, Optional[Any]]) -> Dict[str, Markup]:
        regions: Dict[str, Markup] = {}
        for key, doc in documents.items():
            renderer = RENDERERS.get(key)
            if doc is None and key == "team":
                # la grille équipe affiche son message même sans document
                regions["team-grid"] = Markup(NO_TEAM_MESSAGE)
            if doc is None or renderer is None:
                continue
            try:
                regions.update(renderer(doc))
            except (AttributeError, TypeError) as e:
                # document mal formé : seule sa section reste vide
                self.on_error(key, e)
        return regions

    def load_regions(self, keys: Iterable[str] = CONTENT_KEYS) -> Dict[str, Markup]:
        return self.render(self.load_all(keys))
