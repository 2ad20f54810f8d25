"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

CWA_BASE_URL = "https://opendata.cwa.gov.tw/api"


class CwaConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = CWA_BASE_URL
    timeout: float = Field(default=30.0, gt=0.0)
    short_range_dataset: str = "F-C0032-001"  # 36-hour forecast per county
    weekly_dataset: str = "F-D0047-091"  # 7-day forecast per county


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    cors_origins: list[str] = ["*"]


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: str = "INFO"


class ServiceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    cwa: CwaConfig = CwaConfig()
    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()
