from pydantic_settings import BaseSettings, SettingsConfigDict

from mgtapi.transit.client import DEFAULT_BASE_URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False  # DEBUG logging, which prints upstream error bodies
    transit_base_url: str = DEFAULT_BASE_URL  # must end with "/"
    transit_escape_stop_id: bool = False  # percent-encode stop ids instead of passing them through verbatim

    # Live API tests run only when RUN_INTEGRATION_TESTS is literally "true"
    run_integration_tests: str = ""

    @property
    def integration_tests_enabled(self) -> bool:
        return self.run_integration_tests == "true"


def get_settings() -> Settings:
    return Settings()
