# alertmap/settings.py
from __future__ import annotations
from datetime import date
from pydantic import BaseModel, Field

class ArchiveConfig(BaseModel):
    base_url: str = "https://www.fema.gov/api/open/v1/IpawsArchivedAlerts"
    top: int = 1000
    timeout_sec: int = 30
    max_retries: int = 3
    backoff_initial_sec: float = 0.5
    backoff_max_sec: float = 10.0

class GeocoderConfig(BaseModel):
    base_url: str = "https://nominatim.openstreetmap.org/search"
    country: str = "USA"
    user_agent: str = "IPAWS-Alert-Viewer"
    timeout_sec: int = 10

class MapConfig(BaseModel):
    archive_start: date = date(2012, 6, 1)    # 아카이브 데이터 시작일
    default_window_days: int = 14

class Observability(BaseModel):
    http_port: int = 8099
    metrics_enabled: bool = True
    service_name: str = "alert-map"
    build_version: str = "0.1.0"
    build_date: str = "2026-10-18"
    log_level: str = "INFO"

class Settings(BaseModel):
    # 하위 섹션 (기본값/팩토리로 누락 방지)
    archive: ArchiveConfig = Field(default_factory=ArchiveConfig)
    geocoder: GeocoderConfig = Field(default_factory=GeocoderConfig)
    map: MapConfig = Field(default_factory=MapConfig)
    observability: Observability = Field(default_factory=Observability)
