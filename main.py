# main.py

import logging

# Configurar logging ANTES que todo
from mcp_hub.core.config import settings
from logging_config import setup_logging
setup_logging(settings.LOG_LEVEL, settings.LOG_DIR)

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mcp_hub.connectors.factory import scan_handlers, get_registry_status
from mcp_hub.core.auth import resolve_internal_api_key
from mcp_hub.exceptions import register_exception_handlers
from mcp_hub.exceptions.middleware import ErrorHandlingMiddleware
from mcp_hub.stores import InMemoryStore, default_seed

from mcp_hub.routers.mcp_router       import router as mcp_router
from mcp_hub.routers.discovery_router import router as discovery_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Se ejecuta cuando FastAPI inicia el servidor y tiene su loop.
    1) Resuelve la clave interna (sin clave no arranca).
    2) Carga todos los handlers registrados para MCP.
    3) Crea el store simulado que reciben los handlers mock.
    """
    app.state.internal_api_key = resolve_internal_api_key()

    scan_handlers()
    status = get_registry_status()
    logging.info(f"MCP handlers registered: {status['handlers_registered']}")

    app.state.mock_store = InMemoryStore(default_seed)

    yield


app = FastAPI(title="MCP Hub", debug=settings.DEBUG, lifespan=lifespan)


# Health check endpoint (público)
@app.get("/health")
async def health_check():
    return {"status": "ok", "message": "MCP Server is running"}


app.add_middleware(ErrorHandlingMiddleware, include_error_details=settings.DEBUG)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(discovery_router)  # /discover
app.include_router(mcp_router)        # /mcp/{provider}/{action}

# --- Manejadores globales de errores ---
register_exception_handlers(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)
