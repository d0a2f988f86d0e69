"""Response serialization for Pydantic payload models."""

from pydantic import BaseModel

from ..schema.types import TIME_ZONE_CONTEXT_KEY
from ..timezones import registry


def dump_payload(model: BaseModel) -> dict:
    """Dump a model to JSON-ready data in the current client time zone.

    Instant fields are written as round-trip timestamps in the client's zone;
    calendar dates are written as YYYY-MM-DD.
    """
    return model.model_dump(
        mode="json",
        context={TIME_ZONE_CONTEXT_KEY: registry.current_client_zone()}
    )
