"""Shared schema configuration."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Request body that rejects fields it does not declare."""

    model_config = ConfigDict(extra="forbid")


class MessageResponse(CamelModel):
    """Plain confirmation message."""

    message: str
