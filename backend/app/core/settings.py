import os


def _env_list(name: str, default: str) -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _normalize_database_url(url: str) -> str:
    # Hosted Postgres providers hand out postgres://, SQLAlchemy wants postgresql://
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


class Settings:
    def __init__(self, **overrides):
        self.app_name = os.getenv("APP_NAME", "Bookkeeping API")
        self.api_version = "1.0.0"
        self.environment = os.getenv("ENVIRONMENT", "development")
        self.secret_key = os.getenv("SECRET_KEY", "CHANGE_ME")
        self.access_token_expire_minutes = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
        self.database_url = os.getenv("DATABASE_URL", "sqlite:///./bookkeeping.db")
        self.cors_origins = _env_list("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

        # Invoice branding
        self.company_name = os.getenv("COMPANY_NAME", "Mumtaz Associates")
        self.company_tagline = os.getenv("COMPANY_TAGLINE", "Civil, Architecture & Interior Consultancy")
        self.invoice_footer = os.getenv("INVOICE_FOOTER", "Thank you for choosing us!")
        self.currency_symbol = os.getenv("CURRENCY_SYMBOL", "Rs. ")
        self.invoice_date_format = os.getenv("INVOICE_DATE_FORMAT", "%d/%m/%Y")
        self.invoice_font_path = os.getenv("INVOICE_FONT_PATH") or None

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)
        self.database_url = _normalize_database_url(self.database_url)


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
