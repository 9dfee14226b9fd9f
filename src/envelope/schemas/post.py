"""Post-related Pydantic schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FetchType(str, Enum):
    """Direction of a fetch relative to the requested timestamp."""

    OLD = "old"
    NEW = "new"


class FetchParams(BaseModel):
    """Validated fetch request."""

    type: FetchType
    time: float
    count: int = Field(..., ge=1)
    deviceid: str


class SubmitPostResponse(BaseModel):
    """Identifiers returned to the poster. Never echoes ``text`` or ``md5``."""

    share_hash: str
    edit_hash: str
    time: int


class PostDocument(BaseModel):
    """A stored post as returned by ``/fetch``.

    This is the full stored record, ``edit_hash`` included.
    """

    id: int
    share_hash: str
    edit_hash: str
    text: str
    time: int
    md5: str

    model_config = ConfigDict(from_attributes=True)
