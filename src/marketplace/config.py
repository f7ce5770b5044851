from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Pydantic Settings automatically reads env vars matching field names (case-insensitive).
    In development, it also reads from .env file if present.
    In production, set environment variables directly (Docker, k8s, etc.).
    """

    # Database connection URL
    # Format: sqlite+aiosqlite:///<path to database file>
    # - sqlite = SQLAlchemy dialect
    # - aiosqlite = async driver wrapping the stdlib sqlite3 module
    database_url: str = "sqlite+aiosqlite:///./data/marketplace.db"

    db_echo: bool = False  # Log all SQL statements (True for debugging)
    db_busy_timeout: float = 30.0  # Seconds SQLite waits on a locked database file

    # Insert the demo users and hotels when the database is empty
    seed_demo_data: bool = True

    cors_allow_origins: list[str] = ["*"]

    host: str = "0.0.0.0"
    port: int = 3000

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env in development
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


settings = Settings()
