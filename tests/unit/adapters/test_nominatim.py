"""
Nominatim 지오코더 Adapter 단위 테스트
"""

import pytest
import aiohttp
from unittest.mock import AsyncMock, patch

from alertmap.adapters.nominatim.client import NominatimGeocoder


class TestNominatimGeocoder:
    """Nominatim 지오코더 테스트"""

    @pytest.fixture
    def geocoder(self):
        return NominatimGeocoder(base_url="http://geo.test/search")

    def test_defaults(self, geocoder):
        assert geocoder.country == "USA"
        assert geocoder.user_agent == "IPAWS-Alert-Viewer"

    async def test_geocode_first_hit(self, geocoder):
        hits = [{"lat": "39.7392", "lon": "-104.9903"}, {"lat": "0", "lon": "0"}]
        with patch.object(geocoder, "_search", new=AsyncMock(return_value=hits)) as search:
            assert await geocoder.geocode("80202") == (39.7392, -104.9903)
        search.assert_awaited_once_with("80202")

    @pytest.mark.parametrize("hits", [[], None, {"error": "x"}])
    async def test_geocode_no_hit(self, geocoder, hits):
        with patch.object(geocoder, "_search", new=AsyncMock(return_value=hits)):
            assert await geocoder.geocode("00000") is None

    @pytest.mark.parametrize("hit", [{"lat": "abc", "lon": "1"}, {"lon": "1"}, {"lat": "95", "lon": "1"}])
    async def test_geocode_bad_hit(self, geocoder, hit):
        with patch.object(geocoder, "_search", new=AsyncMock(return_value=[hit])):
            assert await geocoder.geocode("12345") is None

    async def test_geocode_transport_failure(self, geocoder):
        error = aiohttp.ClientConnectionError("down")
        with patch.object(geocoder, "_search", new=AsyncMock(side_effect=error)):
            assert await geocoder.geocode("12345") is None
