"""Shared schema bases."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serializing field names as camelCase.

    Accepts both ``mentor_id`` and ``mentorId`` on input; FastAPI responses
    are rendered by alias, so clients always see camelCase.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
