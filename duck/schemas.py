from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DuckSize(str, Enum):
    small = "small"
    medium = "medium"
    large = "large"


# Request schemas
class NewRubberDuck(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Duck name")
    color: str = Field(..., description="Duck color")
    size: DuckSize = Field(..., description="Size category")


# Response schemas
class RubberDuck(NewRubberDuck):
    id: int = Field(..., description="Identity assigned by the store")


class Error(BaseModel):
    code: int = Field(..., description="Mirrors the HTTP status code")
    message: str


class HealthResponse(BaseModel):
    status: str
    store: str
