from typing import List, Literal, Optional

import sentry_sdk
from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True)

    ############ Common ############
    ENV: Literal["dev", "stag", "prod"] = "dev"
    PROJECT_NAME: str = "Form Builder"
    SENTRY_DSN: Optional[AnyHttpUrl] = None

    # Format: postgresql://<username>:<password>@<hostname>:<port>/<database_name>
    DATABASE_URL: str = "sqlite:///./formbuilder.db"
    DB_SESSION_POOL_SIZE: int = 10
    DB_SESSION_POOL_MAX_OVERFLOW_SIZE: int = 5
    CREATE_TABLES_ON_STARTUP: bool = True
    # When set, init_db seeds an empty database with one form of this title
    SAMPLE_FORM_TITLE: Optional[str] = None

    ############ Logging ############
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    # error.log and combined.log are written here when set
    LOG_DIR: Optional[str] = None

    ############ Web server only ############
    API_STR: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    # Comma separated, e.g. "http://localhost:3000,https://forms.example.com"
    BACKEND_CORS_ORIGINS: str = "*"

    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.BACKEND_CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()


if settings.SENTRY_DSN:
    sentry_sdk.init(
        str(settings.SENTRY_DSN),
        traces_sample_rate=0.2,
        environment=settings.ENV,
        integrations=[
            SqlalchemyIntegration(),
        ],
    )
