"""
Alert archive port interface.

This module defines the protocol for retrieving archived alerts
for a date window.
"""

from datetime import date
from typing import List, Optional, Protocol
from alertmap.core.models import Alert, ViewportBounds

class AlertFetchError(Exception):
    """경보 아카이브 전송 실패"""

class AlertArchivePort(Protocol):
    """경보 아카이브 포트 인터페이스"""

    async def fetch_alerts(
        self,
        start: date,
        end: date,
        bounds: Optional[ViewportBounds] = None,
    ) -> List[Alert]:
        """
        기간 내 경보를 조회합니다.

        Args:
            start: 시작일 (포함)
            end: 종료일 (포함)
            bounds: 주어지면 뷰포트와 겹치는 경보만 반환

        Returns:
            경보 목록

        Raises:
            AlertFetchError: 전송 실패 시
        """
        ...
