"""
Common 모듈 단위 테스트

이 모듈은 지리 유틸리티와 재시도 로직의 기능을 테스트합니다.
"""

import pytest
from unittest.mock import AsyncMock, patch
from alertmap.common.geo import (
    as_lon_lat, calculate_bounding_box, is_finite_number, validate_coordinates
)
from alertmap.common.retry import backoff_delay, retry_with_backoff


class TestIsFiniteNumber:
    """유한 숫자 판정 테스트"""

    @pytest.mark.parametrize("value", [0, 1, -1.5, 1e300, -0.0])
    def test_finite_numbers(self, value):
        assert is_finite_number(value) is True

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), "1.0", None, True, False, [1]])
    def test_not_finite_numbers(self, value):
        assert is_finite_number(value) is False


class TestAsLonLat:
    """좌표 쌍 변환 테스트"""

    def test_valid_pair(self):
        assert as_lon_lat([-100, 40]) == (-100.0, 40.0)

    def test_tuple_with_altitude(self):
        assert as_lon_lat((1.5, 2.5, 300)) == (1.5, 2.5)

    @pytest.mark.parametrize("pair", [None, [], [1], "12", {"lon": 1, "lat": 2}, [1, None], [float("nan"), 2]])
    def test_invalid_pair(self, pair):
        assert as_lon_lat(pair) is None


class TestBoundingBox:
    """경계 상자 계산 테스트"""

    def test_bounding_box(self):
        points = [(40.0, -100.0), (41.0, -100.0), (40.0, -99.0)]
        assert calculate_bounding_box(points) == (40.0, -100.0, 41.0, -99.0)

    def test_bounding_box_accepts_generator(self):
        assert calculate_bounding_box(p for p in [(1.0, 2.0)]) == (1.0, 2.0, 1.0, 2.0)

    def test_bounding_box_empty(self):
        assert calculate_bounding_box([]) is None


class TestValidateCoordinates:
    @pytest.mark.parametrize("lat,lon,expected", [
        (0, 0, True),
        (90, 180, True),
        (-90, -180, True),
        (90.1, 0, False),
        (0, -180.1, False),
    ])
    def test_validate_coordinates(self, lat, lon, expected):
        assert validate_coordinates(lat, lon) is expected


class TestRetry:
    """재시도 로직 테스트"""

    @pytest.mark.parametrize("attempt,expected", [(1, 0.5), (2, 1.0), (3, 2.0), (10, 5.0)])
    def test_backoff_delay(self, attempt, expected):
        assert backoff_delay(attempt, 0.5, 5.0) == expected

    def test_backoff_delay_jitter_bounds(self):
        for _ in range(20):
            delay = backoff_delay(3, 1.0, 60.0, jitter=True)
            assert 2.0 <= delay <= 4.0

    async def test_retry_success_first_try(self):
        func = AsyncMock(return_value="ok")
        assert await retry_with_backoff(func, max_retries=3) == "ok"
        assert func.await_count == 1

    async def test_retry_then_success(self):
        func = AsyncMock(side_effect=[ConnectionError("a"), ConnectionError("b"), "ok"])
        with patch("alertmap.common.retry.asyncio.sleep", new=AsyncMock()) as sleep:
            result = await retry_with_backoff(func, max_retries=3, base_delay=0.1, jitter=False)
        assert result == "ok"
        assert func.await_count == 3
        assert [c.args[0] for c in sleep.await_args_list] == [0.1, 0.2]

    async def test_retry_exhausted_raises_last_error(self):
        func = AsyncMock(side_effect=ConnectionError("down"))
        with patch("alertmap.common.retry.asyncio.sleep", new=AsyncMock()):
            with pytest.raises(ConnectionError, match="down"):
                await retry_with_backoff(func, max_retries=2, base_delay=0.1)
        assert func.await_count == 3

    async def test_retry_only_on_listed_errors(self):
        func = AsyncMock(side_effect=ValueError("bad"))
        with pytest.raises(ValueError):
            await retry_with_backoff(func, max_retries=5, retry_on=(ConnectionError,))
        assert func.await_count == 1
