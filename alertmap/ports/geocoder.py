"""
Geocoder port interface.

This module defines the protocol for resolving a postal code
to a map position.
"""

from typing import Optional, Protocol
from alertmap.core.models import LatLng

class GeocoderPort(Protocol):
    """지오코딩 포트 인터페이스"""

    async def geocode(self, postal_code: str) -> Optional[LatLng]:
        """
        우편번호를 좌표로 변환합니다.

        Returns:
            (위도, 경도) 또는 None
        """
        ...
