from pydantic import BaseModel, ConfigDict


class CamelCaseModel(BaseModel):
    """Base model with camelCase alias support."""

    model_config = ConfigDict(populate_by_name=True)
