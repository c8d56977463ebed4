"""
Nominatim geocoding client for alert-map.

Resolves a postal code to a (latitude, longitude) pair, used only to
recenter the map.
"""

import asyncio
from typing import Any, Optional

import aiohttp

from alertmap.common.geo import validate_coordinates
from alertmap.core.models import LatLng
from alertmap.observability.logging_setup import get_logger

log = get_logger("alertmap.geocoder")

DEFAULT_BASE_URL = "https://nominatim.openstreetmap.org/search"

class NominatimGeocoder:
    """Nominatim 우편번호 지오코더"""

    def __init__(self,
                 base_url: str = DEFAULT_BASE_URL,
                 country: str = "USA",
                 user_agent: str = "IPAWS-Alert-Viewer",
                 timeout: int = 10):
        self.base_url = base_url
        self.country = country
        self.user_agent = user_agent
        self.timeout = timeout

    async def _search(self, postal_code: str) -> Any:
        params = {
            "postalcode": postal_code,
            "country": self.country,
            "format": "json",
            "limit": "1",
        }
        async with aiohttp.ClientSession(
            headers={"User-Agent": self.user_agent},
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        ) as session:
            async with session.get(self.base_url, params=params) as response:
                response.raise_for_status()
                return await response.json(content_type=None)

    async def geocode(self, postal_code: str) -> Optional[LatLng]:
        """
        우편번호를 좌표로 변환합니다.

        Args:
            postal_code: 우편번호

        Returns:
            (위도, 경도) 또는 None (결과 없음/실패)
        """
        try:
            results = await self._search(postal_code)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log.error(f"지오코딩 실패 postal_code:{postal_code} error:{e!r}")
            return None

        if not isinstance(results, list) or not results:
            log.info(f"지오코딩 결과 없음 postal_code:{postal_code}")
            return None

        try:
            lat = float(results[0]["lat"])
            lon = float(results[0]["lon"])
        except (KeyError, TypeError, ValueError) as e:
            log.error(f"지오코딩 응답 형식 오류 postal_code:{postal_code} error:{e!r}")
            return None

        if not validate_coordinates(lat, lon):
            log.warning(f"지오코딩 좌표 범위 벗어남 lat:{lat} lon:{lon}")
            return None

        log.info(f"지오코딩 성공 postal_code:{postal_code} lat:{lat} lon:{lon}")
        return (lat, lon)
