"""Normalized forecast models returned to clients."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastInterval:
    start_time: str
    end_time: str
    weather: str = ""
    rain: str = ""
    min_temp: str = ""
    max_temp: str = ""
    comfort: str = ""
    wind_speed: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "weather": self.weather,
            "rain": self.rain,
            "minTemp": self.min_temp,
            "maxTemp": self.max_temp,
            "comfort": self.comfort,
            "windSpeed": self.wind_speed,
        }


@dataclass(frozen=True)
class DailyForecast:
    date: str  # YYYY-MM-DD
    day_of_week: str
    weather: str = ""
    rain_prob: str = ""
    min_temp: str = ""
    max_temp: str = ""
    wind_speed: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "date": self.date,
            "dayOfWeek": self.day_of_week,
            "weather": self.weather,
            "rainProb": self.rain_prob,
            "minTemp": self.min_temp,
            "maxTemp": self.max_temp,
            "windSpeed": self.wind_speed,
        }


@dataclass(frozen=True)
class ForecastResponse:
    city: str
    city_key: str
    forecasts: list[ForecastInterval] | list[DailyForecast]
    update_time: str | None = None  # short-range dataset only

    def to_dict(self) -> dict:
        data: dict = {"city": self.city, "cityKey": self.city_key}
        if self.update_time is not None:
            data["updateTime"] = self.update_time
        data["forecasts"] = [f.to_dict() for f in self.forecasts]
        return data
