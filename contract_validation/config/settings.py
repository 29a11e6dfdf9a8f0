"""
Environment settings loaded from .env file.

Module-level values are read once at import. Validators never read them
directly: callers build a ContractSettings and pass it in.
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# --- API under test ---
BASE_URL: str = os.getenv("BASE_URL", "https://petstore.swagger.io/v2")
API_KEY: str = os.getenv("API_KEY") or os.getenv("PETSTORE_API_KEY", "")
ENV: str = os.getenv("ENV", "dev")
TIMEOUT_MS: int = int(os.getenv("TIMEOUT", "30000"))
RETRIES: int = int(os.getenv("RETRIES", "2"))

# --- Contract ---
OPENAPI_SPEC_PATH: str = os.getenv("OPENAPI_SPEC_PATH", "")
STRICT_REQUIRED: bool = _env_bool("STRICT_REQUIRED", "true")

# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class ContractSettings:
    """Explicit configuration handed to the validators."""

    base_url: str = "https://petstore.swagger.io/v2"
    api_key: str = ""
    env: str = "dev"
    timeout_ms: int = 30000
    retries: int = 2
    openapi_spec_path: str = ""
    strict_required: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ContractSettings":
        """Snapshot the environment-derived module values."""
        return cls(
            base_url=BASE_URL,
            api_key=API_KEY,
            env=ENV,
            timeout_ms=TIMEOUT_MS,
            retries=RETRIES,
            openapi_spec_path=OPENAPI_SPEC_PATH,
            strict_required=STRICT_REQUIRED,
            log_level=LOG_LEVEL,
        )

    def __repr__(self) -> str:
        # api_key stays out of logs
        return (
            f"ContractSettings(env={self.env!r}, base_url={self.base_url!r}, "
            f"strict_required={self.strict_required})"
        )
