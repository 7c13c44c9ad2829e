"""Central environment-driven settings plus the explicit carrier config object.

The process loads `settings` once at startup (see `.env.example`). Request
code never reads the environment directly; it receives a `CarrierConfig`
built from these settings at construction time.
"""

from pydantic import BaseModel, ConfigDict, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


UPS_TEST_URL = "https://wwwcie.ups.com/rest/FreightPickup"
UPS_PRODUCTION_URL = "https://onlinetools.ups.com/rest/FreightPickup"
DEFAULT_TIMEOUT_SECONDS = 7.0


class CommonSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "freight-pickup"
    log_level: str = "INFO"
    ups_username: str = ""
    ups_password: str = ""
    ups_access_key: str = ""
    ups_production: bool = False
    ups_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    api_key: str | None = None
    otel_exporter_otlp_endpoint: str | None = None
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class Credentials(BaseModel):
    """UPS website login plus the API access license number."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: SecretStr
    access_key: SecretStr


class CarrierConfig:
    """Credentials and endpoint consumed by the pickup service.

    Written once during setup, read by every request afterwards. The test
    endpoint is selected until `select_endpoint(True)` is called.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        production: bool = False,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.credentials = credentials or Credentials(username="", password="", access_key="")
        self.endpoint_url = UPS_TEST_URL
        self.timeout_seconds = timeout_seconds
        self.select_endpoint(production)

    @classmethod
    def from_settings(cls, source: CommonSettings) -> "CarrierConfig":
        config = cls(production=source.ups_production, timeout_seconds=source.ups_timeout_seconds)
        config.set_credentials(source.ups_username, source.ups_password, source.ups_access_key)
        return config

    def set_credentials(self, username: str, password: str, access_key: str) -> None:
        self.credentials = Credentials(username=username, password=password, access_key=access_key)

    def select_endpoint(self, is_production: bool) -> None:
        self.endpoint_url = UPS_PRODUCTION_URL if is_production else UPS_TEST_URL

    @property
    def is_production(self) -> bool:
        return self.endpoint_url == UPS_PRODUCTION_URL


settings = CommonSettings()
