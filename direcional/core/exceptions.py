# direcional/core/exceptions.py
"""Exceções de domínio, traduzidas para ErrorResponse pelo handler de core/middleware.py."""
from typing import Any, Dict, Optional


class DirecionalError(Exception):
    """Base para todas as falhas de negócio"""
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(DirecionalError):
    """Cliente, apartamento, venda ou usuário inexistente"""
    status_code = 404
    error_code = "not_found"


class ConflictError(DirecionalError):
    """Violação de regra de negócio (apartamento indisponível, venda finalizada...)"""
    status_code = 409
    error_code = "conflict"


class BusinessValidationError(DirecionalError):
    status_code = 422
    error_code = "validation_error"
