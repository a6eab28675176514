import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self):
        self.app_name = "EduTrack"
        self.api_version = "1.0.0"
        self.database_url = os.getenv("EDUTRACK_DATABASE_URL", "sqlite:///./school.db")
        self.session_cookie_name = os.getenv("EDUTRACK_SESSION_COOKIE", "edutrack_session")
        self.session_expire_minutes = int(os.getenv("EDUTRACK_SESSION_EXPIRE_MINUTES", "480"))
        self.cookie_secure = _env_bool("EDUTRACK_COOKIE_SECURE", False)
        self.log_level = os.getenv("EDUTRACK_LOG_LEVEL", "INFO").upper()
        self.seed_demo_data = _env_bool("EDUTRACK_SEED_DEMO_DATA", True)
        origins = os.getenv("EDUTRACK_CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
        self.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
