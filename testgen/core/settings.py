from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from TESTGEN_* environment variables.

    These only affect how the CLI reports; detection itself has no knobs.
    """

    model_config = SettingsConfigDict(
        env_prefix="TESTGEN_",
        case_sensitive=False,
    )

    # Verbose console logging (debug-level detector decisions)
    debug: bool = False

    # Emit JSON log lines instead of the coloured console renderer
    log_json: bool = False


def get_settings() -> Settings:
    return Settings()
