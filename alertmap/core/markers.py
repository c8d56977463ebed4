"""
Marker derivation for alert-map.

Each geographic area of an alert is reduced to one map pin. A polygon
area is pinned at the plain average of its vertices (not the
area-weighted centroid; vertex-dense edges pull the pin toward them).
A circle-only area is pinned at its center.
"""

from typing import Iterable, List, Optional

from alertmap.common.geo import LatLng
from alertmap.core.models import Alert, AlertArea, Marker
from alertmap.core.shapes import parse_disc, parse_ring

def area_center(area: AlertArea) -> Optional[LatLng]:
    """
    영역의 대표 좌표를 계산합니다.

    Args:
        area: 경보 영역

    Returns:
        (위도, 경도) 또는 None (폴리곤 우선, 다음 원)
    """
    ring = parse_ring(area.polygon)
    if ring is not None:
        n = len(ring.points)
        lat = sum(p[0] for p in ring.points) / n
        lon = sum(p[1] for p in ring.points) / n
        return (lat, lon)

    disc = parse_disc(area.circle)
    if disc is not None:
        return disc.center

    return None

def marker_id(alert: Alert, alert_index: int, info_index: int, area_index: int) -> str:
    """배치 내에서 유일하고 호출 간 재현 가능한 마커 ID"""
    return f"{alert.identifier}:{alert_index}:{info_index}:{area_index}"

def derive_markers(alerts: Iterable[Alert]) -> List[Marker]:
    """
    경보 목록을 영역별 마커 목록으로 변환합니다.

    Args:
        alerts: 경보 목록

    Returns:
        경보 → info → 영역 순서의 마커 목록 (중복 제거 없음)
    """
    markers: List[Marker] = []

    for alert_index, alert in enumerate(alerts):
        for info_index, info in enumerate(alert.info):
            for area_index, area in enumerate(info.areas):
                center = area_center(area)
                if center is None:
                    continue
                markers.append(Marker(
                    id=marker_id(alert, alert_index, info_index, area_index),
                    position=center,
                    alert=alert,
                ))

    return markers
