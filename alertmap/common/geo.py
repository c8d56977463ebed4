"""
Geographic utilities for alert-map.

This module provides the small numeric helpers shared by the
shape parser and viewport filter: finite-number checks,
coordinate validation and bounding-box calculation.
"""

import math
from typing import Any, Iterable, Optional, Tuple

# (위도, 경도)
LatLng = Tuple[float, float]

def is_finite_number(value: Any) -> bool:
    """
    값이 유한한 실수인지 확인합니다.

    bool 과 숫자 문자열은 숫자로 취급하지 않습니다.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)

def as_lon_lat(pair: Any) -> Optional[Tuple[float, float]]:
    """
    (경도, 위도) 쌍을 float 튜플로 변환합니다.

    Args:
        pair: 원시 좌표 쌍 [경도, 위도, (고도)...]

    Returns:
        (경도, 위도) 또는 None
    """
    if not isinstance(pair, (list, tuple)) or len(pair) < 2:
        return None

    lon, lat = pair[0], pair[1]
    if not (is_finite_number(lon) and is_finite_number(lat)):
        return None

    return (float(lon), float(lat))

def calculate_bounding_box(points: Iterable[LatLng]) -> Optional[Tuple[float, float, float, float]]:
    """
    점 목록의 경계 상자를 계산합니다.

    Args:
        points: 점 목록 [(위도, 경도), ...]

    Returns:
        (min_lat, min_lon, max_lat, max_lon), 점이 없으면 None
    """
    pts = list(points)
    if not pts:
        return None

    lats = [p[0] for p in pts]
    lons = [p[1] for p in pts]

    return (min(lats), min(lons), max(lats), max(lons))

def validate_coordinates(lat: float, lon: float) -> bool:
    """
    좌표가 유효한지 확인합니다.

    Args:
        lat: 위도
        lon: 경도

    Returns:
        좌표가 유효하면 True
    """
    return -90 <= lat <= 90 and -180 <= lon <= 180
