"""
Error taxonomy shared by the service layer and the HTTP handlers.
"""
from typing import Optional

from washbay.config import get_settings


# Generic user-facing messages, keyed by locale.
MESSAGES = {
    "en": {
        "auth_required": "Authentication required",
        "permission_denied": "Insufficient permissions",
        "not_found": "Not found",
        "validation": "Please fill in all required fields",
        "remote": "The server could not complete the request. Please try again.",
    },
    "pt-BR": {
        "auth_required": "Autenticação necessária",
        "permission_denied": "Permissão insuficiente",
        "not_found": "Registro não encontrado",
        "validation": "Por favor, preencha todos os campos.",
        "remote": "Erro ao processar a solicitação. Por favor, tente novamente.",
    },
}


def message(key: str, locale: Optional[str] = None) -> str:
    """Look up a generic message, falling back to English."""
    locale = locale or get_settings().locale
    catalog = MESSAGES.get(locale, MESSAGES["en"])
    return catalog.get(key, MESSAGES["en"][key])


class WashBayError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = 500
    message_key = "remote"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or message(self.message_key)
        super().__init__(self.detail)


class AuthRequiredError(WashBayError):
    """No authenticated actor for a protected operation."""

    status_code = 401
    message_key = "auth_required"


class PermissionDeniedError(WashBayError):
    """The actor is authenticated but not allowed to do this."""

    status_code = 403
    message_key = "permission_denied"


class NotFoundError(WashBayError):
    status_code = 404
    message_key = "not_found"


class ValidationError(WashBayError):
    """A required field is missing or a value is out of range."""

    status_code = 422
    message_key = "validation"


class RemoteError(WashBayError):
    """The persistence or auth backend failed; treated opaquely."""

    status_code = 503
    message_key = "remote"
