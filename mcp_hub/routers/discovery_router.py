# mcp_hub/routers/discovery_router.py

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from mcp_hub.discovery.catalog import build_catalog
from mcp_hub.dtos.catalog_dto import DiscoveryResponseDTO
from mcp_hub.exceptions.logging_utils import get_hub_logger

logger = get_hub_logger(__name__)

router = APIRouter(tags=["discovery"])


@router.get(
    "/discover",
    response_model=DiscoveryResponseDTO,
    summary="Catálogo de proveedores, acciones y payloads de ejemplo",
)
async def discover():
    """
    Recorre los paquetes de handlers y describe cada acción:
      - args_schema / auth_schema (etiquetas de tipo)
      - sample_payload generado a partir de args_schema
    No se cachea: se reconstruye en cada request.
    """
    try:
        return build_catalog()
    except Exception as e:
        logger.error("Failed to generate discovery data", error=e)
        return JSONResponse(status_code=500, content={"error": "Failed to generate discovery data."})
