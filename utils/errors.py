"""
Exceptions métier du site
"""


class ContentUnavailable(Exception):
    """Document de contenu absent, illisible ou JSON invalide"""

    def __init__(self, resource: str, reason: str = ""):
        self.resource = resource
        self.reason = reason
        super().__init__(f"{resource} data not available")


class ContactValidationError(ValueError):
    """Soumission de contact incomplète"""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__("Missing fields")
