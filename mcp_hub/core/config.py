# mcp_hub/core/config.py

import os
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()  # Carga .env en os.environ


def _as_bool(value: str) -> bool:
    return value.lower() in ("1", "true", "yes")


def _as_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    # Configuración general
    DEBUG: bool = _as_bool(os.getenv("DEBUG", "false"))
    PORT: int = int(os.getenv("PORT", 3000))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    # Vacío = solo consola
    LOG_DIR: str = os.getenv("LOG_DIR", "")

    # Clave interna que protege /mcp
    MCP_SERVER_INTERNAL_API_KEY: str = os.getenv("MCP_SERVER_INTERNAL_API_KEY", "")
    MCP_SERVER_INTERNAL_API_KEY_FALLBACK: str = os.getenv("MCP_SERVER_INTERNAL_API_KEY_FALLBACK", "")

    CORS_ALLOWED_ORIGINS: List[str] = _as_list(
        os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173")
    )

    # HTTPX: un solo intento por handler, sin reintentos.
    # Sin HTTPX_TIMEOUT se usa el timeout por defecto de httpx
    HTTPX_TIMEOUT: Optional[float] = float(os.environ["HTTPX_TIMEOUT"]) if os.getenv("HTTPX_TIMEOUT") else None

    # Stripe
    STRIPE_API_BASE: str = os.getenv("STRIPE_API_BASE", "https://api.stripe.com/v1")

    # Shopify (credenciales de la tienda, no vienen en el objeto auth)
    SHOPIFY_API_KEY: str = os.getenv("SHOPIFY_API_KEY", "")
    SHOPIFY_API_PASSWORD: str = os.getenv("SHOPIFY_API_PASSWORD", "")
    SHOPIFY_STORE_DOMAIN: str = os.getenv("SHOPIFY_STORE_DOMAIN", "")
    SHOPIFY_API_VERSION: str = os.getenv("SHOPIFY_API_VERSION", "2025-04")


settings = Settings()
