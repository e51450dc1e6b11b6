"""Pydantic schema for the share-link endpoint."""

from pydantic import BaseModel, ConfigDict

from growth_projection.schemas.config import Configuration


class ShareResponse(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="null")

    inputs: Configuration
    query: str
