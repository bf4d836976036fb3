"""
Utilidades centralizadas para logging estructurado en MCP Hub
"""

import logging
import traceback
from typing import Any, Dict, Optional


class HubLogger:
    """
    Logger que agrega contexto key=value a cada mensaje
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.component_name = name.split('.')[-1].upper()

    def _format_message(self, message: str, **kwargs) -> str:
        """Formatea el mensaje con información adicional"""
        prefix = f"{self.component_name}: {message}"
        if kwargs:
            additional_info = " | ".join([f"{k}={v}" for k, v in kwargs.items()])
            return f"{prefix} | {additional_info}"
        return prefix

    def info(self, message: str, **kwargs):
        self.logger.info(self._format_message(message, **kwargs))

    def debug(self, message: str, **kwargs):
        self.logger.debug(self._format_message(message, **kwargs))

    def warning(self, message: str, **kwargs):
        self.logger.warning(self._format_message(message, **kwargs))

    def error(self, message: str, error: Optional[Exception] = None, **kwargs):
        """Log nivel ERROR con stack trace opcional"""
        formatted_msg = self._format_message(message, **kwargs)
        if error:
            formatted_msg += f" | error_type={type(error).__name__} | error_msg={str(error)}"
        self.logger.error(formatted_msg)

        if error and error.__traceback__ is not None:
            stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
            self.logger.debug(f"{self.component_name}: Stack trace: {stack}")

    def log_api_request(self, method: str, path: str, **extra):
        self.info(f"API Request: {method} {path}", **extra)

    def log_api_response(self, method: str, path: str, status_code: int, duration_ms: int, **extra):
        self.info(f"API Response: {method} {path}", status_code=status_code, duration_ms=duration_ms, **extra)


def get_hub_logger(name: str) -> HubLogger:
    """Factory para obtener un HubLogger"""
    return HubLogger(name)


SENSITIVE_KEYS = {
    'password', 'token', 'secret', 'key', 'auth', 'credential',
    'api_key', 'access_token', 'refresh_token', 'consumersecret',
}


def sanitize_sensitive_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Enmascara datos sensibles antes de loggear
    """
    sanitized = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        if any(sensitive_key in key_lower for sensitive_key in SENSITIVE_KEYS):
            sanitized[key] = "***REDACTED***"
        elif isinstance(value, dict):
            sanitized[key] = sanitize_sensitive_data(value)
        elif isinstance(value, str) and len(value) > 200:
            sanitized[key] = value[:200] + "...TRUNCATED"
        else:
            sanitized[key] = value

    return sanitized


def mask_secret(value: Optional[str], visible: int = 5) -> str:
    """Deja visibles solo los primeros caracteres de un token"""
    if not value:
        return "N/A"
    return value[:visible] + "..."
