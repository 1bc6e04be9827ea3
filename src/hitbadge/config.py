from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # MongoDB URL with the database name in the path, e.g. mongodb://localhost/hitbadge
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    debug: bool = False
    pool_max_size: int = 10  # Upper bound of pooled MongoDB connections
    pool_timeout_ms: int = 5000  # How long a request waits for a pooled connection before failing
    server_selection_timeout_ms: int = 5000
    logo_base_url: str = "https://cdn.simpleicons.org"  # Where named badge logos are resolved

    model_config = {
        "env_file": [".env"],
        "env_prefix": "HITBADGE_",
        "extra": "ignore",
    }
