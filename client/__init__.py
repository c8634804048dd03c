"""
Logique côté client : chargement du contenu, formulaire de contact, thème/logo.
Utilisable en HTTP (requests) ou en local par les pages rendues côté serveur.
"""

from .contact_form import ContactFormClient, ContactFormState, FormOutcome
from .content_loader import CONTENT_KEYS, ContentLoader
from .theme import Logo, LogoSwapper, Subscription, ThemeState, theme_class

__all__ = [
    'CONTENT_KEYS',
    'ContactFormClient',
    'ContactFormState',
    'ContentLoader',
    'FormOutcome',
    'Logo',
    'LogoSwapper',
    'Subscription',
    'ThemeState',
    'theme_class',
]
