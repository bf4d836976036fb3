from typing import Any, Dict, List

from pydantic import BaseModel, Field


class ActionCatalogDTO(BaseModel):
    action_name: str = Field(..., description="Nombre de la acción, ej. getCustomerByEmail")
    display_name: str
    description: str
    args_schema: Dict[str, str] = Field(default_factory=dict, description="Campo -> etiqueta de tipo")
    auth_schema: Dict[str, str] = Field(default_factory=dict)
    sample_payload: Dict[str, Any] = Field(default_factory=dict)


class ProviderCatalogDTO(BaseModel):
    provider_name: str
    display_name: str
    description: str
    actions: List[ActionCatalogDTO] = Field(default_factory=list)


class DiscoveryResponseDTO(BaseModel):
    providers: List[ProviderCatalogDTO] = Field(default_factory=list)
