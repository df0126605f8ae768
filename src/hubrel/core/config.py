"""Configuration for hubrel."""

from dataclasses import dataclass
import os


DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0


@dataclass
class HubrelConfig:
    """Configuration for the GitHub releases client."""

    api_url: str
    token: str | None
    timeout: float

    @classmethod
    def default(cls) -> "HubrelConfig":
        """Create config from environment variables."""
        return cls(
            api_url=os.environ.get("HUBREL_API_URL", DEFAULT_API_URL).rstrip("/"),
            token=os.environ.get("GITHUB_TOKEN") or None,
            timeout=float(os.environ.get("HUBREL_TIMEOUT", DEFAULT_TIMEOUT)),
        )


# Global config instance
_config: HubrelConfig | None = None


def get_config() -> HubrelConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = HubrelConfig.default()
    return _config


def set_config(config: HubrelConfig | None) -> None:
    """Set a custom configuration (useful for testing)."""
    global _config
    _config = config
