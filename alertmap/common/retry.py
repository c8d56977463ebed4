"""
Retry utilities for alert-map.

This module provides retry and backoff helpers used by the
network adapters (alert archive, geocoder).
"""

import asyncio
import random
from typing import Awaitable, Callable, Tuple, Type, TypeVar

from alertmap.observability.logging_setup import get_logger

log = get_logger("alertmap.retry")

T = TypeVar('T')

def backoff_delay(attempt: int, base: float, max_delay: float, jitter: bool = False) -> float:
    """
    지수 백오프 지연 시간을 계산합니다.

    Args:
        attempt: 현재 시도 횟수 (1부터 시작)
        base: 기본 지연 시간 (초)
        max_delay: 최대 지연 시간 (초)
        jitter: 지터 적용 여부

    Returns:
        지연 시간 (초)
    """
    delay = min(max_delay, base * (2 ** max(0, attempt - 1)))
    if jitter:
        delay = delay * (0.5 + random.random() * 0.5)
    return delay

async def retry_with_backoff(
    func: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 60.0,
    jitter: bool = True,
    retry_on: Tuple[Type[BaseException], ...] = (Exception,),
) -> T:
    """
    지수 백오프와 함께 함수를 재시도합니다.

    Args:
        func: 재시도할 비동기 함수
        max_retries: 최대 재시도 횟수
        base_delay: 기본 지연 시간 (초)
        max_delay: 최대 지연 시간 (초)
        jitter: 지터 적용 여부
        retry_on: 재시도 대상 예외 타입

    Returns:
        함수 실행 결과

    Raises:
        마지막 시도에서 발생한 예외
    """
    attempt = 1
    while True:
        try:
            return await func()
        except retry_on as e:
            if attempt > max_retries:
                raise

            delay = backoff_delay(attempt, base_delay, max_delay, jitter)
            log.warning(f"재시도 예정 attempt:{attempt} delay:{delay:.2f}s error:{e!r}")
            await asyncio.sleep(delay)
            attempt += 1
