"""
Viewport filtering for alert-map.

An alert is visible in a viewport when at least one polygon vertex
or circle center lies inside the rectangle (edges inclusive). This is
a point test, not a shape intersection: a polygon that fully encloses
the viewport without a vertex inside it is reported as not visible.
Viewports whose west edge exceeds the east edge wrap across the
antimeridian.
"""

from typing import Iterable, Iterator, List

from alertmap.common.geo import LatLng
from alertmap.core.boundaries import iter_areas
from alertmap.core.models import Alert, ViewportBounds
from alertmap.core.shapes import parse_disc, parse_ring

def point_in_bounds(point: LatLng, bounds: ViewportBounds) -> bool:
    """
    점이 뷰포트 안에 있는지 확인합니다 (경계 포함).

    Args:
        point: (위도, 경도)
        bounds: 뷰포트 경계

    Returns:
        포함되면 True
    """
    lat, lon = point
    if not (bounds.south <= lat <= bounds.north):
        return False

    if bounds.crosses_antimeridian:
        return lon >= bounds.west or lon <= bounds.east
    return bounds.west <= lon <= bounds.east

def _candidate_points(alert: Alert) -> Iterator[LatLng]:
    for area in iter_areas(alert):
        ring = parse_ring(area.polygon)
        if ring is not None:
            yield from ring.points

        disc = parse_disc(area.circle)
        if disc is not None:
            yield disc.center

def alert_in_viewport(alert: Alert, bounds: ViewportBounds) -> bool:
    """경보의 꼭짓점/원 중심 중 하나라도 뷰포트 안에 있으면 True"""
    return any(point_in_bounds(p, bounds) for p in _candidate_points(alert))

def filter_by_viewport(alerts: Iterable[Alert], bounds: ViewportBounds) -> List[Alert]:
    """
    뷰포트와 겹치는 경보만 입력 순서대로 반환합니다.

    Args:
        alerts: 경보 목록
        bounds: 뷰포트 경계

    Returns:
        필터링된 경보 목록 (같은 객체 참조)
    """
    return [alert for alert in alerts if alert_in_viewport(alert, bounds)]
