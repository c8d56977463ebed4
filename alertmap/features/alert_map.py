"""
Alert map feature for alert-map.

This module wires the archive and geocoder ports to the geometry
core: it loads alerts for a date window, derives map markers,
narrows alerts to a viewport and builds the zoom geometry of a
selected alert.
"""

import time
from datetime import date, timedelta
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from alertmap.core.boundaries import alert_bounds, extract_boundaries, fit_bounds
from alertmap.core.markers import derive_markers
from alertmap.core.models import Alert, BoundarySet, LatLng, Marker, ViewportBounds
from alertmap.core.viewport import filter_by_viewport
from alertmap.observability import metrics
from alertmap.observability.logging_setup import get_logger, with_context
from alertmap.ports.archive import AlertArchivePort, AlertFetchError
from alertmap.ports.geocoder import GeocoderPort

log = get_logger("alertmap.feature")

ARCHIVE_START = date(2012, 6, 1)
DEFAULT_WINDOW_DAYS = 14

NO_ALERTS_MESSAGE = "No alerts found for the selected criteria"
FETCH_FAILED_MESSAGE = "Failed to load alerts. Please try again."

class AlertQueryResult(BaseModel):
    """기간 조회 결과"""
    model_config = ConfigDict(frozen=True)

    start: date
    end: date
    alerts: List[Alert] = Field(default_factory=list)
    markers: List[Marker] = Field(default_factory=list)
    error: Optional[str] = None

class AlertSelection(BaseModel):
    """선택된 경보의 렌더링/줌 정보"""
    model_config = ConfigDict(frozen=True)

    boundaries: BoundarySet
    zoom_points: List[LatLng] = Field(default_factory=list)
    zoom_bounds: Optional[ViewportBounds] = None

def resolve_window(start: Optional[date],
                   end: Optional[date],
                   *,
                   archive_start: date = ARCHIVE_START,
                   default_window_days: int = DEFAULT_WINDOW_DAYS,
                   today: Optional[date] = None) -> Tuple[date, date]:
    """
    조회 기간을 확정합니다.

    Args:
        start: 시작일 (없으면 종료일 - 기본 기간)
        end: 종료일 (없으면 오늘)
        archive_start: 아카이브 데이터 시작일
        default_window_days: 기본 조회 기간 (일)
        today: 기준일 (테스트용)

    Returns:
        (시작일, 종료일)

    Raises:
        ValueError: 시작일이 종료일보다 늦은 경우
    """
    end = end or today or date.today()
    start = start or (end - timedelta(days=default_window_days))

    # 아카이브 시작일 이전은 데이터가 없음
    if start < archive_start:
        start = archive_start

    if start > end:
        raise ValueError(f"start({start}) is after end({end})")

    return start, end

class AlertMapService:
    """경보 지도 서비스"""

    def __init__(self,
                 archive: AlertArchivePort,
                 geocoder: Optional[GeocoderPort] = None,
                 *,
                 archive_start: date = ARCHIVE_START,
                 default_window_days: int = DEFAULT_WINDOW_DAYS):
        self.archive = archive
        self.geocoder = geocoder
        self.archive_start = archive_start
        self.default_window_days = default_window_days

    async def load(self,
                   start: Optional[date] = None,
                   end: Optional[date] = None,
                   bounds: Optional[ViewportBounds] = None) -> AlertQueryResult:
        """
        기간 내 경보와 마커를 조회합니다.

        전송 실패는 빈 결과와 한 번의 오류 메시지로 변환됩니다.

        Raises:
            ValueError: 조회 기간이 잘못된 경우
        """
        start, end = resolve_window(
            start, end,
            archive_start=self.archive_start,
            default_window_days=self.default_window_days,
        )

        with with_context(window=f"{start}..{end}"):
            began = time.perf_counter()
            try:
                alerts = await self.archive.fetch_alerts(start, end, bounds)
            except AlertFetchError as e:
                metrics.alert_fetch_failures.inc()
                log.error(f"경보 조회 실패 error:{e}")
                return AlertQueryResult(start=start, end=end, error=FETCH_FAILED_MESSAGE)
            finally:
                metrics.fetch_seconds.observe(time.perf_counter() - began)

            metrics.alerts_fetched.inc(len(alerts))
            markers = self.markers(alerts)
            log.info(f"경보 로드 완료 alerts:{len(alerts)} markers:{len(markers)}")

        return AlertQueryResult(
            start=start,
            end=end,
            alerts=alerts,
            markers=markers,
            error=None if alerts else NO_ALERTS_MESSAGE,
        )

    def markers(self, alerts: List[Alert]) -> List[Marker]:
        """경보 목록에서 마커를 만듭니다."""
        with metrics.derive_seconds.time():
            markers = derive_markers(alerts)
        metrics.markers_derived.inc(len(markers))
        return markers

    def filter(self, alerts: List[Alert], bounds: ViewportBounds) -> List[Alert]:
        """뷰포트와 겹치는 경보만 남깁니다."""
        visible = filter_by_viewport(alerts, bounds)
        metrics.viewport_filtered.inc(len(alerts) - len(visible))
        return visible

    def select(self, alert: Optional[Alert]) -> AlertSelection:
        """선택된 경보의 경계와 줌 영역을 계산합니다."""
        with metrics.derive_seconds.time():
            boundaries = extract_boundaries(alert)
            points = alert_bounds(alert)
        return AlertSelection(
            boundaries=boundaries,
            zoom_points=points,
            zoom_bounds=fit_bounds(points),
        )

    async def locate(self, postal_code: str) -> Optional[LatLng]:
        """우편번호 위치를 조회합니다. 지오코더가 없으면 None."""
        if self.geocoder is None:
            return None
        return await self.geocoder.geocode(postal_code)
