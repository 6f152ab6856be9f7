from pydantic import BaseModel, ConfigDict, Field, PositiveFloat
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_SPEC_FILE, ENV_PREFIX
from .models import HeaderMap

NO_CACHE_HEADERS: HeaderMap = {
    "Cache-Control": ["no-cache"],
    "Pragma": ["no-cache"],
}


class ValidatorConfig(BaseModel):
    """Run-wide options passed explicitly to the validator and HTTP client."""

    model_config = ConfigDict(frozen=True)

    forced_request_headers: HeaderMap = Field(
        default_factory=dict,
        description="Headers sent with every request, overridden by spec headers.",
    )
    no_cache: bool = Field(default=False, description="Send no-cache request headers to bypass intermediate caches.")
    disable_connection_reuse: bool = Field(default=False, description="Open a new connection for every request.")
    timeout: PositiveFloat | None = Field(default=None, description="Transport timeout in seconds. None waits indefinitely.")


class Settings(BaseSettings):
    forced_request_headers: HeaderMap = Field(default_factory=dict)
    no_cache: bool = False
    disable_connection_reuse: bool = False
    timeout: PositiveFloat | None = None
    default_spec_file: str = DEFAULT_SPEC_FILE

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    def to_config(self) -> ValidatorConfig:
        return ValidatorConfig(
            forced_request_headers=self.forced_request_headers,
            no_cache=self.no_cache,
            disable_connection_reuse=self.disable_connection_reuse,
            timeout=self.timeout,
        )
