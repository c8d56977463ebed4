"""
OpenFEMA IPAWS archive client for alert-map.

This module retrieves archived IPAWS alerts for a date window from
the OpenFEMA API and converts the records into Alert models.
"""

import asyncio
from datetime import date, datetime
from typing import Any, Dict, List, Optional

import aiohttp
from pydantic import ValidationError

from alertmap.common.retry import retry_with_backoff
from alertmap.core.models import Alert, ViewportBounds
from alertmap.core.viewport import filter_by_viewport
from alertmap.observability.logging_setup import get_logger
from alertmap.ports.archive import AlertFetchError

log = get_logger("alertmap.fema")

DEFAULT_BASE_URL = "https://www.fema.gov/api/open/v1/IpawsArchivedAlerts"
RESULT_KEY = "IpawsArchivedAlerts"

def _as_day(value: date) -> str:
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()

def build_query(start: date, end: date, top: int = 1000) -> Dict[str, str]:
    """
    OData 쿼리 매개변수를 생성합니다.

    Args:
        start: 시작일
        end: 종료일
        top: 최대 레코드 수

    Returns:
        쿼리 매개변수
    """
    return {
        "$filter": f"sent ge '{_as_day(start)}' and sent le '{_as_day(end)}'",
        "$top": str(top),
        "$orderby": "sent desc",
    }

def parse_alerts(data: Any) -> List[Alert]:
    """응답 본문에서 경보 목록을 추출합니다. 검증 실패 레코드는 건너뜁니다."""
    if not isinstance(data, dict):
        return []

    records = data.get(RESULT_KEY)
    if not isinstance(records, list):
        return []

    alerts: List[Alert] = []
    for record in records:
        try:
            alerts.append(Alert.model_validate(record))
        except ValidationError as e:
            ident = record.get("identifier") if isinstance(record, dict) else None
            log.warning(f"경보 레코드 건너뜀 identifier:{ident} errors:{e.error_count()}")

    return alerts

class IpawsArchiveClient:
    """IPAWS 아카이브 API 클라이언트"""

    def __init__(self,
                 base_url: str = DEFAULT_BASE_URL,
                 top: int = 1000,
                 timeout: int = 30,
                 max_retries: int = 3,
                 backoff_initial: float = 0.5,
                 backoff_max: float = 10.0):
        """
        초기화합니다.

        Args:
            base_url: 아카이브 API URL
            top: 한 번에 가져올 최대 레코드 수
            timeout: 요청 타임아웃 (초)
            max_retries: 전송 실패 시 재시도 횟수
            backoff_initial: 첫 재시도 지연 (초)
            backoff_max: 최대 재시도 지연 (초)
        """
        self.base_url = base_url.rstrip('/')
        self.top = top
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_initial = backoff_initial
        self.backoff_max = backoff_max
        self.session: Optional[aiohttp.ClientSession] = None

        log.info(f"IPAWS 아카이브 클라이언트 초기화됨 url:{self.base_url}")

    async def __aenter__(self):
        """비동기 컨텍스트 매니저 진입"""
        self.session = self._new_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """비동기 컨텍스트 매니저 종료"""
        if self.session:
            await self.session.close()
            self.session = None

    def _new_session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(
            headers={"Accept": "application/json"},
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        )

    async def _get_json(self, session: aiohttp.ClientSession, params: Dict[str, str]) -> Any:
        async with session.get(self.base_url, params=params) as response:
            response.raise_for_status()
            return await response.json(content_type=None)

    async def _make_request(self, params: Dict[str, str]) -> Any:
        """
        API 요청을 수행합니다. 세션이 없으면 요청 단위로 엽니다.

        Raises:
            AlertFetchError: 재시도 후에도 전송 실패 시, 응답 본문이 JSON 이 아닌 경우
        """
        async def _request():
            if self.session is not None:
                return await self._get_json(self.session, params)
            async with self._new_session() as session:
                return await self._get_json(session, params)

        try:
            return await retry_with_backoff(
                _request,
                max_retries=self.max_retries,
                base_delay=self.backoff_initial,
                max_delay=self.backoff_max,
                retry_on=(aiohttp.ClientError, asyncio.TimeoutError),
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise AlertFetchError(f"IPAWS archive request failed: {e!r}") from e
        except ValueError as e:
            # 200 응답이지만 JSON 이 아닌 본문 (HTML 오류 페이지 등)
            log.error(f"아카이브 응답 본문 해석 실패 error:{e!r}")
            raise AlertFetchError(f"IPAWS archive returned an unreadable body: {e!r}") from e

    async def fetch_alerts(self,
                           start: date,
                           end: date,
                           bounds: Optional[ViewportBounds] = None) -> List[Alert]:
        """
        기간 내 경보를 조회합니다.

        Args:
            start: 시작일 (포함)
            end: 종료일
            bounds: 주어지면 뷰포트와 겹치는 경보만 반환

        Returns:
            최신순 경보 목록

        Raises:
            AlertFetchError: 전송 실패 시
        """
        data = await self._make_request(build_query(start, end, self.top))
        alerts = parse_alerts(data)
        log.info(f"경보 조회 완료 start:{_as_day(start)} end:{_as_day(end)} count:{len(alerts)}")

        if bounds is not None:
            alerts = filter_by_viewport(alerts, bounds)
            log.info(f"뷰포트 필터 적용 count:{len(alerts)}")

        return alerts
