from datetime import datetime
from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel
from typing import Annotated

from ..services.scheduling import to_utc_iso

# Stored timestamps are naive UTC; on the wire they carry an explicit "Z"
UtcDateTime = Annotated[datetime, PlainSerializer(to_utc_iso, return_type=str, when_used="json")]


class CamelModel(BaseModel):
    """Wire models use camelCase keys and accept snake_case on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
