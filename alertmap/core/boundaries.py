"""
Boundary extraction for alert-map.

This module collects every renderable shape of a single alert and
derives the point list and rectangle used to zoom the map onto it.
"""

from typing import Iterator, List, Optional, Sequence

from alertmap.common.geo import LatLng, calculate_bounding_box
from alertmap.core.models import Alert, AlertArea, BoundarySet, Disc, Ring, ViewportBounds
from alertmap.core.shapes import parse_disc, parse_ring

def iter_areas(alert: Optional[Alert]) -> Iterator[AlertArea]:
    """경보의 모든 info 블록에 걸친 영역을 순서대로 순회합니다."""
    if alert is None:
        return
    for info in alert.info:
        yield from info.areas

def extract_boundaries(alert: Optional[Alert]) -> BoundarySet:
    """
    경보의 모든 영역에서 링과 원을 모읍니다.

    Args:
        alert: 대상 경보 (없으면 빈 결과)

    Returns:
        BoundarySet (한 영역이 링과 원을 모두 낼 수 있음)
    """
    rings: List[Ring] = []
    discs: List[Disc] = []

    for area in iter_areas(alert):
        ring = parse_ring(area.polygon)
        if ring is not None:
            rings.append(ring)

        disc = parse_disc(area.circle)
        if disc is not None:
            discs.append(disc)

    return BoundarySet(rings=rings, discs=discs)

def alert_bounds(alert: Optional[Alert]) -> List[LatLng]:
    """
    줌 대상 점 목록을 반환합니다 (링 꼭짓점 + 원 중심).

    원의 반경은 포함하지 않습니다.
    """
    points: List[LatLng] = []
    for area in iter_areas(alert):
        ring = parse_ring(area.polygon)
        if ring is not None:
            points.extend(ring.points)

        disc = parse_disc(area.circle)
        if disc is not None:
            points.append(disc.center)

    return points

def fit_bounds(points: Sequence[LatLng]) -> Optional[ViewportBounds]:
    """점 목록을 감싸는 뷰포트를 계산합니다. 점이 없으면 None."""
    box = calculate_bounding_box(points)
    if box is None:
        return None

    min_lat, min_lon, max_lat, max_lon = box
    return ViewportBounds(north=max_lat, south=min_lat, east=max_lon, west=min_lon)
