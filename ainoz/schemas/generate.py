"""
Wire types shared by the SDK and the relayer.

GenerationRequest is what callers hand to the client, RelayerRequest is how the
relayer reads the same body (every field optional so that missing fields can be
answered with the relayer's own 400 instead of FastAPI's 422).
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerationRequest(BaseModel):
    # no min_length here: empty model/prompt are rejected by AinozClient's request
    # validation so they surface as ainoz ValidationError, not a pydantic one
    model_config = ConfigDict(frozen=True)

    model: str
    prompt: str
    wallet: Optional[str] = None


class GenerationResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str
    request_id: str = Field(alias="requestId")


class StreamChunk(BaseModel):
    data: str


class RelayerRequest(BaseModel):
    model: Optional[str] = None
    prompt: Optional[str] = None
    wallet: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
