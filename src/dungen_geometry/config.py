"""dungen-geometry configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, key_name: str, env_var: str) -> None:
        """Initialize configuration error.

        Args:
            key_name: Human-readable name of the missing key.
            env_var: Environment variable name to set.
        """
        self.key_name = key_name
        self.env_var = env_var
        message = (
            f"{key_name} not configured. "
            f"Set it in .env file or {env_var} environment variable."
        )
        super().__init__(message)


class Settings(BaseSettings):
    """Library settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Sampling
    SAMPLING_SEED: int | None = None  # None = fresh OS entropy per process

    # Containment rendering
    RENDER_DISJOINT_CHAR: str = " "
    RENDER_INTERSECTS_CHAR: str = "#"
    RENDER_CONTAINS_CHAR: str = "."

    def require_sampling_seed(self) -> int:
        """Get the sampling seed, raising ConfigError if not set.

        Use this when a caller needs reproducible generation and must not
        silently fall back to OS entropy.

        Returns:
            The configured seed.

        Raises:
            ConfigError: If SAMPLING_SEED is not configured.
        """
        if self.SAMPLING_SEED is None:
            raise ConfigError("Sampling seed", "SAMPLING_SEED")
        return self.SAMPLING_SEED


# Singleton instance for import convenience
settings = Settings()
