from pydantic import BaseModel, ConfigDict
from typing import Optional, Any, Dict, Union

class Location(BaseModel):
    # Demais colunas da tabela passam direto
    model_config = ConfigDict(extra="allow")

    id: int
    name: str

class LocationFound(BaseModel):
    data: Optional[Location] = None
    status: int

class LocationError(BaseModel):
    status: int
    error: Union[str, Dict[str, Any]]
