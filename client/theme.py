"""
Thème automatique (préférence système) et choix du logo clair/sombre.

Le logo n'est jamais remplacé par une image cassée : chaque candidat est
préchargé (sondé) dans l'ordre et le premier disponible est retenu.
"""

import logging
import re
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set
from urllib.parse import urljoin

import requests

logger = logging.getLogger(__name__)

DARK_CLASS = "dark-theme"
LIGHT_CLASS = "light-theme"

DEFAULT_DARK = "../assets/images/logo-dark.png"
DEFAULT_LIGHT = "../assets/images/logo-light.png"


def theme_class(prefers_dark: bool) -> str:
    return DARK_CLASS if prefers_dark else LIGHT_CLASS


# ============================================================
# ETAT + ABONNEMENTS
# ============================================================

class Subscription:
    """Poignée renvoyée par subscribe(), cancel() désabonne"""

    def __init__(self, listeners: list, callback):
        self._listeners = listeners
        self._callback = callback
        self.active = True
        listeners.append(callback)

    def cancel(self):
        if self.active:
            self._listeners.remove(self._callback)
            self.active = False


class ThemeState:
    """
    Classes de l'élément racine + préférence OS.
    Les abonnés sont notifiés avec le type de changement : "class" ou "preference".
    """

    def __init__(self, prefers_dark: bool = False, classes: Iterable[str] = ()):
        self.prefers_dark = prefers_dark
        self.classes: Set[str] = set(classes)
        self._listeners: List[Callable[[str], None]] = []

    def subscribe(self, callback: Callable[[str], None]) -> Subscription:
        return Subscription(self._listeners, callback)

    def _notify(self, change: str):
        for callback in list(self._listeners):
            try:
                callback(change)
            except Exception as e:
                logger.warning(f"⚠️ Callback thème en échec: {e}")

    def set_classes(self, classes: Iterable[str]):
        classes = set(classes)
        if classes != self.classes:
            self.classes = classes
            self._notify("class")

    def set_preference(self, prefers_dark: bool):
        if prefers_dark != self.prefers_dark:
            self.prefers_dark = prefers_dark
            self._notify("preference")

    def apply_system_theme(self):
        classes = self.classes - {DARK_CLASS, LIGHT_CLASS}
        classes.add(theme_class(self.prefers_dark))
        self.set_classes(classes)

    def follow_system(self) -> Subscription:
        """Réapplique le thème système à chaque changement de préférence"""
        self.apply_system_theme()

        def on_change(change: str):
            if change == "preference":
                self.apply_system_theme()

        return self.subscribe(on_change)

    @property
    def explicit(self) -> bool:
        return bool(self.classes & {DARK_CLASS, LIGHT_CLASS})

    def wants_light(self) -> bool:
        if LIGHT_CLASS in self.classes:
            return True
        if DARK_CLASS in self.classes:
            return False
        return not self.prefers_dark


# ============================================================
# CANDIDATS LOGO
# ============================================================

def derive_candidates(current_src: str) -> dict:
    """logo.png -> logo-dark.png / logo-light.png dans le même dossier"""
    if not current_src:
        return {"dark": DEFAULT_DARK, "light": DEFAULT_LIGHT}

    parts = current_src.split("/")
    fname = parts[-1]
    directory = "/".join(parts[:-1]) + "/" if len(parts) > 1 else ""
    base, _, ext = fname.partition(".")
    base = base or "logo"
    ext = ext or "png"

    stem = re.sub(r"-light|-dark", "", base, count=1)
    dark = base if "dark" in base else f"{stem}-dark"
    light = base if "light" in base else f"{stem}-light"
    return {
        "dark": f"{directory}{dark}.{ext}",
        "light": f"{directory}{light}.{ext}",
    }


def candidate_chain(current_src: Optional[str], want_light: bool) -> List[str]:
    current = current_src or DEFAULT_DARK
    derived = derive_candidates(current)
    if want_light:
        chain = [DEFAULT_LIGHT, derived["light"], DEFAULT_DARK, derived["dark"], current]
    else:
        chain = [DEFAULT_DARK, derived["dark"], DEFAULT_LIGHT, derived["light"], current]
    return [src for src in chain if src]


def http_probe(page_url: str, session: Optional[requests.Session] = None, timeout: float = 3):
    """Sonde HTTP : le candidat est chargeable si HEAD répond 2xx"""
    session = session or requests.Session()

    def probe(src: str) -> bool:
        try:
            return session.head(urljoin(page_url, src), timeout=timeout, allow_redirects=True).ok
        except requests.RequestException:
            return False

    return probe


def file_probe(assets_dir):
    """Sonde locale : le candidat ".../assets/<chemin>" existe dans assets_dir"""
    root = Path(assets_dir).resolve()

    def probe(src: str) -> bool:
        _, sep, rel = src.partition("assets/")
        if not sep:
            return False
        path = (root / rel).resolve()
        return root in path.parents and path.is_file()

    return probe


class Logo:
    """Équivalent de l'élément <img> du logo"""

    def __init__(self, src: Optional[str] = None):
        self.src = src


class LogoSwapper:

    def __init__(self, probe: Callable[[str], bool]):
        self.probe = probe

    def choose(self, current_src: Optional[str], want_light: bool) -> Optional[str]:
        """Premier candidat qui se charge, sinon la source actuelle"""
        for src in candidate_chain(current_src, want_light):
            try:
                if self.probe(src):
                    return src
            except Exception as e:
                logger.debug(f"Sonde logo {src} en échec: {e}")
        return current_src

    def apply(self, logo: Logo, state: ThemeState) -> Logo:
        logo.src = self.choose(logo.src, state.wants_light())
        return logo

    def attach(self, state: ThemeState, logo: Logo) -> Subscription:
        """
        Applique tout de suite puis suit les changements :
        classe racine toujours, préférence OS seulement sans classe explicite.
        """
        self.apply(logo, state)

        def on_change(change: str):
            if change == "class" or not state.explicit:
                self.apply(logo, state)

        return state.subscribe(on_change)
