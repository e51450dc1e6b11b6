"""Request parameters for table exports."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

ViewMode = Literal["real", "nominal"]


class ExportParams(BaseModel):
    """Which framing of the projection table to flatten."""

    model_config = ConfigDict(extra="ignore")

    view: ViewMode = "real"
