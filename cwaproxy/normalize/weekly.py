"""Normalize the weekly county forecast (F-D0047-091) into per-day records."""

import logging
from dataclasses import replace
from datetime import date

from cwaproxy.errors import NoLocationDataError, NoWeatherElementsError
from cwaproxy.models.forecast import DailyForecast, ForecastResponse

logger = logging.getLogger(__name__)

# Sunday first, matching date.isoweekday() % 7
WEEKDAY_LABELS = ("日", "一", "二", "三", "四", "五", "六")

NOT_APPLICABLE = "-"

# category name -> (daily field, value key, unit suffix)
ELEMENT_FIELDS: dict[str, tuple[str, str, str]] = {
    "天氣現象": ("weather", "Weather", ""),
    "最高溫度": ("max_temp", "MaxTemperature", "°C"),
    "最低溫度": ("min_temp", "MinTemperature", "°C"),
    "12小時降雨機率": ("rain_prob", "ProbabilityOfPrecipitation", "%"),
    "風速": ("wind_speed", "WindSpeed", ""),
}


def find_location(raw: dict) -> dict:
    """Follow records.Locations[0].Location[0]; any missing link is fatal."""
    try:
        location = raw["records"]["Locations"][0]["Location"][0]
    except (KeyError, IndexError, TypeError):
        location = None
    if not isinstance(location, dict):
        logger.error("Unexpected weekly payload shape, top-level keys: %s", _keys(raw))
        if isinstance(raw, dict) and isinstance(raw.get("records"), dict):
            logger.error("records keys: %s", _keys(raw["records"]))
        raise NoLocationDataError("No location data in weekly payload")
    return location


def day_of_week(day: str) -> str | None:
    """Single-character weekday label for YYYY-MM-DD, None if not a date."""
    try:
        return WEEKDAY_LABELS[date.fromisoformat(day).isoweekday() % 7]
    except ValueError:
        return None


def normalize_weekly(raw: dict, region_key: str) -> ForecastResponse:
    """Re-key element-grouped time buckets by calendar date.

    Buckets are folded into one DailyForecast per date; a later bucket for
    the same date and element overwrites an earlier one. Output is sorted
    by date.
    """
    location = find_location(raw)
    elements = location.get("WeatherElement")
    if not elements:
        raise NoWeatherElementsError("No weather elements in weekly payload")

    daily: dict[str, DailyForecast] = {}
    for element in elements:
        name = element.get("ElementName")
        target = ELEMENT_FIELDS.get(name)
        for bucket in element.get("Time") or []:
            day = (bucket.get("StartTime") or "")[:10]
            if day not in daily:
                label = day_of_week(day)
                if label is None:
                    logger.debug("Skipping %s bucket with start %r", name, bucket.get("StartTime"))
                    continue
                daily[day] = DailyForecast(date=day, day_of_week=label)

            values = bucket.get("ElementValue") or []
            if not values:
                logger.debug("Empty ElementValue for %s at %s", name, bucket.get("StartTime"))
                continue
            if target is None:
                continue

            field, value_key, suffix = target
            value = values[0].get(value_key)
            if value is None or value == "" or value == NOT_APPLICABLE:
                continue
            daily[day] = replace(daily[day], **{field: f"{value}{suffix}"})

    return ForecastResponse(
        city=location.get("LocationName") or "",
        city_key=region_key,
        forecasts=[daily[day] for day in sorted(daily)],
    )


def _keys(obj) -> list[str]:
    return list(obj) if isinstance(obj, dict) else []
