"""Normalize the 36-hour county forecast (F-C0032-001) into intervals."""

import logging
from collections.abc import Callable
from typing import Any

from cwaproxy.errors import NoLocationDataError
from cwaproxy.models.forecast import ForecastInterval, ForecastResponse

logger = logging.getLogger(__name__)


def _from_records(raw: dict) -> dict | None:
    records = raw.get("records")
    if isinstance(records, dict):
        return _first(records.get("location"))
    return None


def _from_result(raw: dict) -> dict | None:
    return _first(raw.get("result"))


def _first(items: Any) -> dict | None:
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return None


# Container shapes seen from upstream, tried in order; first hit wins.
LOCATION_EXTRACTORS: tuple[Callable[[dict], dict | None], ...] = (
    _from_records,
    _from_result,
)

# element name -> (interval field, unit suffix)
ELEMENT_FIELDS: dict[str, tuple[str, str]] = {
    "Wx": ("weather", ""),
    "PoP": ("rain", "%"),
    "MinT": ("min_temp", "°C"),
    "MaxT": ("max_temp", "°C"),
    "CI": ("comfort", ""),
    "WS": ("wind_speed", ""),
}


def find_location(raw: dict) -> dict:
    for extract in LOCATION_EXTRACTORS:
        location = extract(raw)
        if location is not None:
            return location
    raise NoLocationDataError("No location data in short-range payload")


def normalize_short_range(raw: dict, region_key: str) -> ForecastResponse:
    """Build one ForecastInterval per time slot of the first element.

    Slot times come from the first element; every element then fills its
    field for the same slot index. Elements with fewer slots than the first
    leave the missing slots empty.
    """
    location = find_location(raw)
    elements = location.get("weatherElement") or []

    slots = (elements[0].get("time") or []) if elements else []
    for element in elements[1:]:
        count = len(element.get("time") or [])
        if count < len(slots):
            logger.warning(
                "Element %s has %d slots, expected %d",
                element.get("elementName"), count, len(slots),
            )

    forecasts = []
    for i, slot in enumerate(slots):
        fields = {
            "start_time": slot.get("startTime") or "",
            "end_time": slot.get("endTime") or "",
        }
        for element in elements:
            target = ELEMENT_FIELDS.get(element.get("elementName"))
            if target is None:
                continue
            times = element.get("time") or []
            if i >= len(times):
                continue
            value = (times[i].get("parameter") or {}).get("parameterName")
            field, suffix = target
            fields[field] = _with_unit(value, suffix)
        forecasts.append(ForecastInterval(**fields))

    return ForecastResponse(
        city=location.get("locationName") or "",
        city_key=region_key,
        update_time=_dataset_description(raw),
        forecasts=forecasts,
    )


def _dataset_description(raw: dict) -> str:
    records = raw.get("records")
    if isinstance(records, dict):
        return records.get("datasetDescription") or ""
    return ""


def _with_unit(value: Any, suffix: str) -> str:
    if value is None or value == "":
        return ""
    return f"{value}{suffix}"
