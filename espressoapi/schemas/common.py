# espressoapi/schemas/common.py
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    msg: str = Field(description="Error message")

    model_config = {"json_schema_extra": {"examples": [{"msg": "no sheet found for given id"}]}}


class PingResponse(BaseModel):
    ping: str = Field(description='Always "pong"')

    model_config = {"json_schema_extra": {"examples": [{"ping": "pong"}]}}


class ItemDeletedResponse(BaseModel):
    id: int = Field(description="ID of the deleted item")
    msg: str = Field(description="Confirmation message")

    model_config = {
        "json_schema_extra": {"examples": [{"id": 1, "msg": "sheet deleted successfully"}]}
    }
