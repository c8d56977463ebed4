"""
경보 지도 시나리오 테스트

원시 아카이브 레코드에서 마커, 경계, 뷰포트 필터까지의 흐름을
대표 시나리오로 검증합니다.
"""

import pytest
from datetime import date
from unittest.mock import AsyncMock, patch

from alertmap.adapters.fema.client import IpawsArchiveClient
from alertmap.core import derive_markers, extract_boundaries, filter_by_viewport
from alertmap.core.models import Alert, ViewportBounds
from alertmap.features.alert_map import AlertMapService, NO_ALERTS_MESSAGE

POLYGON_RECORD = {
    "identifier": "A",
    "info": [{"area": [{"polygon": {"type": "Polygon",
                                    "coordinates": [[[-100, 40], [-100, 41], [-99, 40]]]}}]}],
}
CIRCLE_RECORD = {
    "identifier": "B",
    "info": [{"area": [{"circle": {"type": "Circle", "coordinates": [-105, 39], "radius": 5}}]}],
}


class TestScenarios:
    """대표 시나리오"""

    def test_scenario_polygon_marker_and_ring(self):
        alert = Alert.model_validate(POLYGON_RECORD)

        markers = derive_markers([alert])
        boundaries = extract_boundaries(alert)

        assert len(markers) == 1
        assert markers[0].position == pytest.approx((40.3333333, -99.6666667))
        assert boundaries.rings[0].points == ((40.0, -100.0), (41.0, -100.0), (40.0, -99.0))
        assert boundaries.discs == []

    def test_scenario_circle_disc(self):
        alert = Alert.model_validate(CIRCLE_RECORD)

        boundaries = extract_boundaries(alert)

        assert boundaries.rings == []
        assert len(boundaries.discs) == 1
        assert boundaries.discs[0].center == (39.0, -105.0)
        assert boundaries.discs[0].radius_m == 5000.0
        assert derive_markers([alert])[0].position == (39.0, -105.0)

    def test_scenario_viewport_match(self):
        alert = Alert.model_validate(POLYGON_RECORD)

        assert filter_by_viewport([alert], ViewportBounds(north=41, south=39, east=-98, west=-101)) == [alert]
        assert filter_by_viewport([alert], ViewportBounds(north=10, south=0, east=10, west=0)) == []

    def test_scenario_alert_without_info(self):
        alert = Alert.model_validate({"identifier": "X", "info": []})

        assert derive_markers([alert]) == []
        assert extract_boundaries(alert).is_empty
        assert filter_by_viewport([alert], ViewportBounds(north=90, south=-90, east=180, west=-180)) == []

    async def test_integration_archive_to_markers(self):
        """아카이브 응답에서 서비스 결과까지"""
        body = {"IpawsArchivedAlerts": [POLYGON_RECORD, {"identifier": "X", "info": None}, CIRCLE_RECORD]}
        archive = IpawsArchiveClient(max_retries=0)
        service = AlertMapService(archive)

        with patch.object(archive, "_make_request", new=AsyncMock(return_value=body)):
            result = await service.load(date(2024, 5, 1), date(2024, 5, 14))

        assert [a.identifier for a in result.alerts] == ["A", "X", "B"]
        assert [m.id for m in result.markers] == ["A:0:0:0", "B:2:0:0"]
        assert result.error is None

        selection = service.select(result.markers[1].alert)
        assert selection.zoom_bounds == ViewportBounds(north=39.0, south=39.0, east=-105.0, west=-105.0)

    async def test_integration_viewport_query(self):
        body = {"IpawsArchivedAlerts": [POLYGON_RECORD, CIRCLE_RECORD]}
        archive = IpawsArchiveClient(max_retries=0)
        service = AlertMapService(archive)
        far_away = ViewportBounds(north=10, south=0, east=10, west=0)

        with patch.object(archive, "_make_request", new=AsyncMock(return_value=body)):
            result = await service.load(date(2024, 5, 1), date(2024, 5, 14), far_away)

        assert result.alerts == []
        assert result.error == NO_ALERTS_MESSAGE
