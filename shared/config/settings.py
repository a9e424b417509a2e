from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

DEFAULT_DRIVER = "postgresql+asyncpg"


class Settings(BaseSettings):
    """
    Process configuration, read once at startup and passed to whatever
    needs it. Connection parameters have no defaults: a missing DB_HOST
    only fails when the first connection is attempted.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    port: int | None = None

    # Database
    db_driver: str = DEFAULT_DRIVER
    db_host: str | None = None
    db_port: int | None = None
    db_user: str | None = None
    db_password: str | None = None
    db_name: str | None = None
    database_url_override: str | None = Field(default=None, validation_alias="DATABASE_URL")
    pool_size: int = Field(default=10, validation_alias="DB_POOL_SIZE")
    max_overflow: int = Field(default=10, validation_alias="DB_MAX_OVERFLOW")
    echo_sql: bool = Field(default=False, validation_alias="DB_ECHO")
    create_schema: bool = Field(default=True, validation_alias="DB_CREATE_SCHEMA")

    # Observability
    otlp_endpoint: str | None = None
    service_name: str = "order_service"

    @property
    def database_url(self) -> str | URL:
        if self.database_url_override:
            return self.database_url_override
        # URL.create quotes credentials, so passwords may contain '@' or '/'
        return URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
