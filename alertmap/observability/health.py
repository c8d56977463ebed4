"""
HTTP endpoints for alert-map.

This module implements health, readiness, metrics and info endpoints
plus the alert map endpoints (alert window query, markers, boundaries,
viewport filter, postal code lookup).
"""

import time
from datetime import date
from typing import List, Optional

from fastapi import Body, FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel, ValidationError

from alertmap.adapters.fema.client import IpawsArchiveClient
from alertmap.adapters.nominatim.client import NominatimGeocoder
from alertmap.core.models import Alert, Marker, ViewportBounds
from alertmap.features.alert_map import AlertMapService
from alertmap.observability.logging_setup import get_logger
from alertmap.settings import Settings

log = get_logger("alertmap.http")

class FilterRequest(BaseModel):
    alerts: List[Alert]
    bounds: ViewportBounds

def marker_view(marker: Marker) -> dict:
    """마커 직렬화 (경보는 식별자만)"""
    return {
        "id": marker.id,
        "position": list(marker.position),
        "alert_id": marker.alert.identifier,
    }

def alert_view(alert: Alert) -> dict:
    return alert.model_dump(by_alias=True, mode="json")

def build_service(settings: Settings) -> AlertMapService:
    """설정으로 서비스를 구성합니다."""
    archive = IpawsArchiveClient(
        base_url=settings.archive.base_url,
        top=settings.archive.top,
        timeout=settings.archive.timeout_sec,
        max_retries=settings.archive.max_retries,
        backoff_initial=settings.archive.backoff_initial_sec,
        backoff_max=settings.archive.backoff_max_sec,
    )
    geocoder = NominatimGeocoder(
        base_url=settings.geocoder.base_url,
        country=settings.geocoder.country,
        user_agent=settings.geocoder.user_agent,
        timeout=settings.geocoder.timeout_sec,
    )
    return AlertMapService(
        archive,
        geocoder,
        archive_start=settings.map.archive_start,
        default_window_days=settings.map.default_window_days,
    )

def _query_bounds(north: Optional[float], south: Optional[float],
                  east: Optional[float], west: Optional[float]) -> Optional[ViewportBounds]:
    edges = (north, south, east, west)
    if all(v is None for v in edges):
        return None
    if any(v is None for v in edges):
        raise HTTPException(status_code=400, detail="north, south, east and west must be given together")
    try:
        return ViewportBounds(north=north, south=south, east=east, west=west)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid viewport: {e.errors()[0]['msg']}")

def create_app(settings: Settings, service: Optional[AlertMapService] = None) -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.observability.service_name,
        version=settings.observability.build_version,
        description="IPAWS Alert Map Service"
    )
    app.state.service = service or build_service(settings)

    start_time = time.time()

    @app.get("/health")
    async def health():
        """헬스 체크 엔드포인트"""
        return JSONResponse({
            "status": "ok",
            "service": settings.observability.service_name,
            "timestamp": time.time()
        })

    @app.get("/ready")
    async def ready():
        """레디니스 체크 엔드포인트"""
        return JSONResponse({
            "status": "ready",
            "service": settings.observability.service_name,
            "timestamp": time.time()
        })

    @app.get("/metrics")
    async def metrics():
        """Prometheus 메트릭 엔드포인트"""
        if not settings.observability.metrics_enabled:
            raise HTTPException(status_code=503, detail="Metrics disabled")

        return Response(
            generate_latest(),
            media_type=CONTENT_TYPE_LATEST
        )

    @app.get("/info")
    async def info():
        """서비스 정보 엔드포인트"""
        uptime = time.time() - start_time
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "build_date": settings.observability.build_date,
            "uptime_seconds": int(uptime),
            "metrics_enabled": settings.observability.metrics_enabled,
            "log_level": settings.observability.log_level
        })

    @app.get("/alerts")
    async def list_alerts(
        start: Optional[date] = Query(default=None),
        end: Optional[date] = Query(default=None),
        north: Optional[float] = Query(default=None),
        south: Optional[float] = Query(default=None),
        east: Optional[float] = Query(default=None),
        west: Optional[float] = Query(default=None),
    ):
        """기간(및 뷰포트) 내 경보와 마커"""
        bounds = _query_bounds(north, south, east, west)
        try:
            result = await app.state.service.load(start, end, bounds)
        except ValueError as e:
            log.warning(f"잘못된 조회 기간 error:{e}")
            raise HTTPException(status_code=400, detail=str(e))

        return {
            "start": result.start.isoformat(),
            "end": result.end.isoformat(),
            "count": len(result.alerts),
            "alerts": [alert_view(a) for a in result.alerts],
            "markers": [marker_view(m) for m in result.markers],
            "error": result.error,
        }

    @app.post("/alerts/markers")
    async def alert_markers(alerts: List[Alert] = Body(...)):
        """경보 목록의 마커"""
        markers = app.state.service.markers(alerts)
        return {"count": len(markers), "markers": [marker_view(m) for m in markers]}

    @app.post("/alerts/boundaries")
    async def alert_boundaries(alert: Optional[Alert] = Body(default=None)):
        """선택된 경보의 경계와 줌 영역"""
        selection = app.state.service.select(alert)
        return selection.model_dump(mode="json")

    @app.post("/alerts/filter")
    async def alert_filter(request: FilterRequest):
        """뷰포트와 겹치는 경보"""
        visible = app.state.service.filter(request.alerts, request.bounds)
        return {"count": len(visible), "alerts": [alert_view(a) for a in visible]}

    @app.get("/geocode/{postal_code}")
    async def geocode(postal_code: str):
        """우편번호 위치"""
        position = await app.state.service.locate(postal_code)
        if position is None:
            raise HTTPException(status_code=404, detail=f"No location for postal code {postal_code}")
        return {"postal_code": postal_code, "latitude": position[0], "longitude": position[1]}

    @app.get("/")
    async def root():
        """루트 엔드포인트"""
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "endpoints": {
                "health": "/health",
                "ready": "/ready",
                "metrics": "/metrics",
                "info": "/info",
                "alerts": "/alerts",
                "markers": "/alerts/markers",
                "boundaries": "/alerts/boundaries",
                "filter": "/alerts/filter",
                "geocode": "/geocode/{postal_code}"
            }
        })

    return app
