"""수익 추정 엔진 전역 설정."""

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class RevenueSettings(BaseSettings):
    # 외부 RPM 소스 (미설정 시 정적 테이블만 사용)
    rate_source_url: str = ""
    rate_source_api_key: str = ""
    rate_source_use_database: bool = False

    # 타임아웃
    rate_source_timeout_sec: float = 3.0

    # 캐시
    rate_cache_ttl_minutes: int = 30

    model_config = {"env_prefix": "RPM_"}

    @property
    def rate_cache_ttl_sec(self) -> float:
        return self.rate_cache_ttl_minutes * 60.0


revenue_settings = RevenueSettings()
