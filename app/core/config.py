from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    environment: str = "development"

    # Gemini 설정 - 커밋 요약/피드백용
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    gemini_timeout: float = 120.0
    gemini_temperature: float = 0.2

    # GitHub
    github_token: str = ""
    github_api_base: str = "https://api.github.com"
    github_api_version: str = "2022-11-28"
    github_user_agent: str = "commit-insight"
    github_timeout: float = 30.0

    # 커밋 목록 페이지 설정
    commits_default_per_page: int = 10
    commits_max_per_page: int = 100

    # diff 압축 설정
    diff_max_chars: int = 8000
    diff_max_files: int = 20
    diff_max_lines_per_file: int = 80
    multi_commit_max: int = 200

    # 로깅 설정
    log_level: str = "INFO"

    # CORS 설정
    cors_allowed_origins: str = "*"

    # 요청 제한
    rate_limit_default: str = "120/minute"
    rate_limit_enabled: bool = True

    # 정적 페이지 디렉토리
    static_dir: str = "public"

    # Langfuse 설정
    langfuse_public_key: str = ""
    langfuse_secret_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    def validate_for_production(self) -> list[str]:
        """프로덕션 환경에서 필수 설정 검증 후 누락된 항목 반환"""
        errors = []
        if not self.gemini_api_key:
            errors.append("GEMINI_API_KEY")
        return errors

    @model_validator(mode="after")
    def validate_production_settings(self):
        """프로덕션 환경에서 필수 설정 검증"""
        if self.is_production:
            missing = self.validate_for_production()
            if missing:
                raise ValueError(f"프로덕션 환경에서 필수 설정 누락: {', '.join(missing)}")
        return self


settings = Settings()
