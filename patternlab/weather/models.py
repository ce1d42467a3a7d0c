from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WeatherData(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: float = 0
    humidity: float = 0
    pressure: float = 0
