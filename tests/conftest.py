"""
테스트 설정 및 픽스처

이 모듈은 pytest 설정과 공통 픽스처를 제공합니다.
"""

import pytest
from unittest.mock import AsyncMock
from alertmap.settings import Settings
from alertmap.core.models import Alert


def build_alert(identifier="A1", areas=None, info_count=1):
    """영역 목록으로 원시 경보 dict 를 만듭니다."""
    infos = [{"headline": f"{identifier} headline", "area": list(areas or [])}]
    infos += [{"headline": "extra", "area": []} for _ in range(info_count - 1)]
    return {
        "cogId": "200032",
        "identifier": identifier,
        "sent": "2024-05-01T12:00:00-05:00",
        "msgType": "Alert",
        "source": "IPAWS",
        "info": infos,
    }


@pytest.fixture
def sample_settings():
    """테스트용 설정"""
    settings = Settings()
    settings.observability.service_name = "test-service"
    settings.observability.build_version = "1.0.0"
    settings.observability.log_level = "INFO"
    settings.observability.http_port = 8080
    return settings


@pytest.fixture
def make_alert():
    """Alert 팩토리"""
    def _make(identifier="A1", areas=None, info_count=1):
        return Alert.model_validate(build_alert(identifier, areas, info_count))
    return _make


@pytest.fixture
def polygon_area():
    """테스트용 폴리곤 영역 (경도, 위도)"""
    return {
        "areaDesc": "Polygon County",
        "polygon": {
            "type": "Polygon",
            "coordinates": [[[-100.0, 40.0], [-100.0, 41.0], [-99.0, 40.0]]],
        },
    }


@pytest.fixture
def circle_area():
    """테스트용 원형 영역"""
    return {
        "areaDesc": "Circle Town",
        "circle": {"type": "Circle", "coordinates": [-105.0, 39.0], "radius": 5},
    }


@pytest.fixture
def polygon_alert(polygon_area):
    return Alert.model_validate(build_alert("POLY-1", [polygon_area]))


@pytest.fixture
def circle_alert(circle_area):
    return Alert.model_validate(build_alert("CIRC-1", [circle_area]))


@pytest.fixture
def empty_alert():
    """info 블록이 없는 경보"""
    return Alert.model_validate({"identifier": "EMPTY-1", "sent": "2024-05-01", "info": []})


@pytest.fixture
def mock_archive():
    """테스트용 아카이브 포트"""
    archive = AsyncMock()
    archive.fetch_alerts.return_value = []
    return archive


@pytest.fixture
def mock_geocoder():
    """테스트용 지오코더 포트"""
    geocoder = AsyncMock()
    geocoder.geocode.return_value = None
    return geocoder


# pytest 설정
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "slow: 느린 테스트 마커"
    )
    config.addinivalue_line(
        "markers", "integration: 통합 테스트 마커"
    )


def pytest_collection_modifyitems(config, items):
    """테스트 아이템 수정"""
    for item in items:
        # 느린 테스트 마커 추가
        if "performance" in item.name or "stress" in item.name:
            item.add_marker(pytest.mark.slow)

        # 통합 테스트 마커 추가
        if "scenario" in item.name or "integration" in item.name:
            item.add_marker(pytest.mark.integration)
