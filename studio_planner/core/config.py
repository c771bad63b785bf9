"""
Application configuration loader and it handles:
- Environment variables
- Remote plan store credentials
- Fallback storage location
- Model configuration
- Export settings

And, the main purpose:
Central place for system configuration.
"""


from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Remote plan store (PostgREST / Supabase). Both empty -> fallback store.
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""
    PLANS_TABLE: str = "plans"
    PLANS_DATA_COLUMN: str = "plan_data"
    REMOTE_TIMEOUT_SECONDS: float = 20.0

    # Fallback (on-device) store
    LOCAL_DATABASE_URL: str = "sqlite+aiosqlite:///./studio_planner.db"
    LOCAL_STORE_KEY: str = "pilates_strategic_plans"

    # LLM
    LLM_PROVIDER: str = "gemini"  # gemini | mock (for no-key dev)
    GEMINI_API_KEY: str = ""
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    LLM_MODEL: str = "gemini-2.5-flash"
    REPORT_LANGUAGE: str = "Brazilian Portuguese"

    LOG_LEVEL: str = "INFO"

    # Export
    EXPORT_DIR: str = "./exports"
    EXPORT_BRAND: str = "Generated by Pilates Plan Pro"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def remote_configured(self) -> bool:
        return bool(self.SUPABASE_URL.strip() and self.SUPABASE_ANON_KEY.strip())

settings = Settings()
