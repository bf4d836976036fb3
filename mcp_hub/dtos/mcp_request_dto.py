from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class McpRequestDTO(BaseModel):
    """Body de POST /mcp/{provider}/{action}"""

    args: Optional[Dict[str, Any]] = Field(None, description="Argumentos de la acción")
    auth: Optional[Dict[str, Any]] = Field(None, description="Credenciales/conexión del proveedor")
