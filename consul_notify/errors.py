"""Exceções do pipeline receive -> parse -> render -> deliver."""

from __future__ import annotations


class NotifyError(Exception):
    """Base para qualquer falha ao notificar um evento de watch."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseError(NotifyError):
    """Corpo não é JSON válido ou não tem o formato de lista de checks."""

    def __init__(self, message: str):
        super().__init__(f"invalid check payload: {message}")


class RenderError(NotifyError):
    """Falha ao compor o template fixo (violação de invariante interna)."""

    def __init__(self, message: str):
        super().__init__(f"failed to render message: {message}")


class DeliveryError(NotifyError):
    """Resposta diferente de 200 ou falha de transporte até o destino."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class BodyReadError(NotifyError):
    """Corpo da requisição de entrada não pôde ser lido."""
