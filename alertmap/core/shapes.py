"""
Shape parsing for alert-map.

This module converts one area's raw geometry (GeoJSON polygon in
longitude/latitude order, or a circle with a kilometer radius) into
normalized shapes in latitude/longitude order with meter radii.
Malformed geometry degrades to ``None``; nothing here raises on
feed data.
"""

import math
from typing import List, Optional

from alertmap.common.geo import LatLng, as_lon_lat, is_finite_number
from alertmap.core.models import CircleGeometry, Disc, PolygonGeometry, Ring
from alertmap.observability.logging_setup import get_logger

log = get_logger("alertmap.shapes")

MIN_RING_POINTS = 3
METERS_PER_KM = 1000

def parse_ring(polygon: Optional[PolygonGeometry]) -> Optional[Ring]:
    """
    폴리곤의 외곽 링을 (위도, 경도) 링으로 변환합니다.

    Args:
        polygon: 원시 폴리곤 ([[[경도, 위도], ...]])

    Returns:
        유효한 꼭짓점이 3개 이상이면 Ring, 아니면 None
    """
    if polygon is None:
        return None

    rings = polygon.coordinates
    if not isinstance(rings, (list, tuple)) or not rings:
        return None

    outer = rings[0]
    if not isinstance(outer, (list, tuple)):
        return None

    points: List[LatLng] = []
    for pair in outer:
        lon_lat = as_lon_lat(pair)
        if lon_lat is None:
            continue
        lon, lat = lon_lat
        points.append((lat, lon))

    if len(points) < MIN_RING_POINTS:
        log.debug(f"폴리곤 폐기 valid_points:{len(points)}")
        return None

    return Ring(points=tuple(points))

def parse_disc(circle: Optional[CircleGeometry]) -> Optional[Disc]:
    """
    원형 영역을 (위도, 경도) 중심과 미터 반경으로 변환합니다.

    Args:
        circle: 원시 원 (중심 [경도, 위도], 반경 km)

    Returns:
        중심이 유효하고 반경이 0보다 크면 Disc, 아니면 None
    """
    if circle is None:
        return None

    lon_lat = as_lon_lat(circle.coordinates)
    if lon_lat is None:
        log.debug(f"원 폐기 center:{circle.coordinates!r}")
        return None

    # 반경 누락은 0 으로 취급
    radius_km = circle.radius if circle.radius is not None else 0
    if not is_finite_number(radius_km):
        log.debug(f"원 폐기 radius:{circle.radius!r}")
        return None

    radius_m = radius_km * METERS_PER_KM
    if not (math.isfinite(radius_m) and radius_m > 0):
        return None

    lon, lat = lon_lat
    return Disc(center=(lat, lon), radius_m=radius_m)
