"""Typed runtime settings with dotenv support and startup validation."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_SUPPORTED_SOURCE_KINDS = ("database", "file", "mock")
CONFIG_SUPPORTED_MONTH_LABEL_LANGUAGES = ("pt", "en")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for API runtime, record sources and analytics.

    Environment variable names map directly to field names in uppercase.
    Example: `database_url` reads from `DATABASE_URL`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        database_url: SQLAlchemy URL of the exam records database.
        exam_source_order: Comma-separated record source kinds tried in order.
        exam_source_file_path: Optional JSON or CSV export used by the `file` source.
        absence_marker: Absence flag value marking a work-absence determination.
        ranking_limit: Number of employers kept in the absence ranking.
        timeline_employer_limit: Number of ranked employers charted in the monthly series.
        report_timezone: IANA timezone used to resolve the current year and exam dates.
        month_label_language: Language of monthly series labels (`pt` or `en`).
        log_level: Root logging level name.
        log_json: Emit JSON log lines instead of plain text.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    database_url: str = Field(default="sqlite:///prisma/exames.db")
    exam_source_order: str = Field(default="database,file,mock")
    exam_source_file_path: str | None = Field(default=None)
    absence_marker: str = Field(default="sim", min_length=1)
    ranking_limit: int = Field(default=5, ge=1)
    timeline_employer_limit: int = Field(default=3, ge=1)
    report_timezone: str = Field(default="America/Sao_Paulo")
    month_label_language: str = Field(default="pt")
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    @field_validator("database_url", "absence_marker")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("exam_source_file_path")
    @classmethod
    def _validate_optional_path(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped_value = value.strip()
        return stripped_value or None

    @field_validator("exam_source_order")
    @classmethod
    def _validate_source_order(cls, value: str) -> str:
        source_kinds = [kind.strip().lower() for kind in value.split(",") if kind.strip()]
        if not source_kinds:
            raise ValueError("exam_source_order must name at least one source")
        unsupported_kinds = [kind for kind in source_kinds if kind not in CONFIG_SUPPORTED_SOURCE_KINDS]
        if unsupported_kinds:
            raise ValueError(f"unsupported exam source kinds: {', '.join(unsupported_kinds)}")
        return ",".join(source_kinds)

    @field_validator("timeline_employer_limit")
    @classmethod
    def _validate_timeline_bounds(cls, value: int, info) -> int:
        ranking_limit = info.data.get("ranking_limit", 5)
        if value > ranking_limit:
            raise ValueError("timeline_employer_limit must be less than or equal to ranking_limit")
        return value

    @field_validator("report_timezone")
    @classmethod
    def _validate_report_timezone(cls, value: str) -> str:
        stripped_value = value.strip()
        try:
            ZoneInfo(stripped_value)
        except (ZoneInfoNotFoundError, ValueError) as error:
            raise ValueError(f"unknown timezone: {stripped_value}") from error
        return stripped_value

    @field_validator("month_label_language")
    @classmethod
    def _validate_month_label_language(cls, value: str) -> str:
        normalized_value = value.strip().lower()
        if normalized_value not in CONFIG_SUPPORTED_MONTH_LABEL_LANGUAGES:
            raise ValueError(f"month_label_language must be one of {CONFIG_SUPPORTED_MONTH_LABEL_LANGUAGES}")
        return normalized_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unsupported log_level: {value}")
        return normalized_value

    def config_source_kinds(self) -> tuple[str, ...]:
        """Return configured record source kinds in fallback order.

        Returns:
            tuple[str, ...]: Normalized source kinds.
        """

        return tuple(self.exam_source_order.split(","))


class DatabaseUrlSettings(BaseSettings):
    """Minimal settings model used by migration tooling.

    This model validates only database connectivity inputs so schema migration
    commands can run without requiring full runtime application settings.

    Attributes:
        database_url: SQLAlchemy URL for schema migrations.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    database_url: str = Field(default="sqlite:///prisma/exames.db")


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_load_database_url() -> str:
    """Load and validate only the database URL setting.

    Returns:
        str: Non-empty database URL for migration and db tooling.

    Raises:
        SettingsLoadError: Raised when database URL cannot be loaded.
    """

    try:
        database_settings = DatabaseUrlSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Database URL configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error

    database_url = str(database_settings.database_url).strip()
    if not database_url:
        raise SettingsLoadError("Database URL configuration validation failed. DATABASE_URL must not be blank.")
    return database_url
