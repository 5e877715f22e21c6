"""Centralized configuration: all env vars in one place."""

import os

DEFAULT_LOTTIE_API_URL = "https://lottiefiles.com/api/v2"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.cors_allow_origin: str = os.getenv("CORS_ALLOW_ORIGIN", "*")
        self.api_host: str = os.getenv("API_HOST", "0.0.0.0")
        self.api_port: int = int(os.getenv("API_PORT", "8000"))

        # Upstream (LottieFiles)
        self.lottie_api_url: str = os.getenv("LOTTIE_API_URL", DEFAULT_LOTTIE_API_URL).rstrip("/")
        self.lottie_popular_url: str | None = os.getenv("LOTTIE_POPULAR_URL") or None
        self.upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))

        # Response cache
        self.cache_ttl_seconds: float = float(os.getenv("CACHE_TTL_SECONDS", "3600"))
        self.cache_max_entries: int = int(os.getenv("CACHE_MAX_ENTRIES", "1024"))
        self.cache_key_include_type: bool = _env_bool("CACHE_KEY_INCLUDE_TYPE", False)
        self.normalize_responses: bool = _env_bool("NORMALIZE_RESPONSES", True)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of configuration problems (empty when settings are usable)."""
        problems = []
        if self.cache_ttl_seconds <= 0:
            problems.append("CACHE_TTL_SECONDS must be positive")
        if self.cache_max_entries < 0:
            problems.append("CACHE_MAX_ENTRIES must be >= 0 (0 disables the bound)")
        if self.upstream_timeout <= 0:
            problems.append("UPSTREAM_TIMEOUT_SECONDS must be positive")
        for var, url in (("LOTTIE_API_URL", self.lottie_api_url), ("LOTTIE_POPULAR_URL", self.lottie_popular_url)):
            if url and not url.startswith(("http://", "https://")):
                problems.append(f"{var} must be an http(s) URL, got {url!r}")
        return problems


settings = Settings()
