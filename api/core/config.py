from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PROJECT_NAME: str = "PostgreSQL KR API"
    VERSION: str = "0.1.0"

    # 서버 바인딩 (Spring Boot 기본 포트와 동일하게 8080)
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=8080, ge=1, le=65535)
    RELOAD: bool = False

    # 로깅 설정 - LOG_FILE이 비어 있으면 stdout만 사용
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    # /metrics 노출 여부 (기본 비활성: 라우트는 / 하나만)
    METRICS_ENABLED: bool = False

    # CORS 허용 Origin - 비어 있으면 CORS 미들웨어 미설치
    CORS_ORIGINS: list[str] = []


settings = Settings()
