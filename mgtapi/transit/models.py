"""Pydantic models for the Moscow transport API stop_v2 response."""
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, model_validator
from pydantic.alias_generators import to_camel


class _Snapshot(BaseModel):
    """
    Immutable view of an API object. Wire names are camelCase.
    Missing or null fields (and null objects) fall back to zero values; scalars are never coerced.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Forecast(_Snapshot):
    time: StrictInt = 0  # unix seconds
    by_telemetry: StrictInt = 0
    tm_id: StrictInt = 0
    route_path_id: StrictStr = ""

    @property
    def is_telemetry(self) -> bool:
        return self.by_telemetry == 1

    @property
    def arrival(self) -> datetime:
        return datetime.fromtimestamp(self.time, tz=timezone.utc)


class RoutePath(_Snapshot):
    id: StrictStr = ""
    type: StrictStr = ""
    number: StrictStr = ""
    last_stop_name: StrictStr = ""
    color: StrictStr = ""
    font_color: StrictStr = ""
    external_forecast: tuple[Forecast, ...] = ()


class StopData(_Snapshot):
    id: StrictStr = ""
    name: StrictStr = ""
    type: StrictStr = ""
    route_path: tuple[RoutePath, ...] = ()

    @classmethod
    def from_json(cls, raw: bytes | str) -> "StopData":
        return cls.model_validate_json(raw)

    def to_json(self) -> str:
        """Encode back to the API's wire format (camelCase keys)."""
        return self.model_dump_json(by_alias=True)
