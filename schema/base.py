from typing import Any, Optional

from pydantic import BaseModel, Field


class GenericResponseModel(BaseModel):
    """
    What every service method hands back to its controller.
    status_code drives the HTTP status and is stripped from the JSON body.
    """

    status_code: int
    message: Optional[str] = None
    status: bool = False
    data: Any = Field(default_factory=dict)
