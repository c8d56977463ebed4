# alertmap/main.py
import os
import uvicorn
from alertmap.settings import Settings
from alertmap.observability.health import create_app
from alertmap.observability.logging_setup import setup_logging_dev, get_logger

def _b(name, default=False): return os.getenv(name, str(default)).lower() in ("1","true","yes","on")

def build_settings() -> Settings:
    s = Settings()

    # 아카이브
    s.archive.base_url = os.getenv("ARCHIVE_BASE_URL", s.archive.base_url)
    s.archive.top = int(os.getenv("ARCHIVE_TOP", s.archive.top))
    s.archive.timeout_sec = int(os.getenv("ARCHIVE_TIMEOUT_SEC", s.archive.timeout_sec))
    s.archive.max_retries = int(os.getenv("ARCHIVE_MAX_RETRIES", s.archive.max_retries))

    # 지오코더
    s.geocoder.base_url = os.getenv("GEOCODER_BASE_URL", s.geocoder.base_url)
    s.geocoder.user_agent = os.getenv("GEOCODER_USER_AGENT", s.geocoder.user_agent)

    # 지도
    s.map.default_window_days = int(os.getenv("DEFAULT_WINDOW_DAYS", s.map.default_window_days))

    # 관측성
    s.observability.metrics_enabled = _b("METRICS_ENABLED", s.observability.metrics_enabled)
    s.observability.http_port = int(os.getenv("HTTP_PORT", s.observability.http_port))
    s.observability.log_level = os.getenv("LOG_LEVEL", s.observability.log_level)

    return s

def main():
    s = build_settings()
    setup_logging_dev(log_level=s.observability.log_level)
    log = get_logger()
    log.info("설정 로드 완료")

    app = create_app(s)
    log.info(f"HTTP 서버 시작 port:{s.observability.http_port}")
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=s.observability.http_port,
        log_level=s.observability.log_level.lower(),
        access_log=True,
    )

if __name__ == "__main__":
    main()
