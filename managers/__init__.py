# managers/__init__.py
"""
Managers pour la logique métier
Exportation centralisée des managers
"""

from .contact_manager import ContactManager, contact_manager
from .content_manager import ContentManager, content_manager

__all__ = [
    'ContactManager',
    'ContentManager',
    'contact_manager',
    'content_manager',
]
