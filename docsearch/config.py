"""
Configuration for the docsearch client.

All settings can be customized via:
1. Environment variables
2. SearchConfig dataclass
3. Runtime overrides
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from loguru import logger

__version__ = "0.1.0"

# =============================================================================
# Upstream endpoint
# =============================================================================

FALLBACK_BASE_URL = "https://shopify.dev"
FALLBACK_SEARCH_PATH = "/mcp/search"
FALLBACK_TIMEOUT_S = "30"
FALLBACK_USER_AGENT = f"docsearch/{__version__}"

DEFAULT_BASE_URL = os.getenv("DOCS_SEARCH_BASE_URL", FALLBACK_BASE_URL)
DEFAULT_SEARCH_PATH = os.getenv("DOCS_SEARCH_PATH", FALLBACK_SEARCH_PATH)
DEFAULT_TIMEOUT_S = float(os.getenv("DOCS_SEARCH_TIMEOUT_S", FALLBACK_TIMEOUT_S))
DEFAULT_USER_AGENT = os.getenv("DOCS_SEARCH_USER_AGENT", FALLBACK_USER_AGENT)


# =============================================================================
# Pagination defaults (can be overridden via environment)
# =============================================================================

FALLBACK_PAGE = "1"
FALLBACK_PER_PAGE = "10"

DEFAULT_PAGE = int(os.getenv("DOCS_SEARCH_DEFAULT_PAGE", FALLBACK_PAGE))
DEFAULT_PER_PAGE = int(os.getenv("DOCS_SEARCH_DEFAULT_PER_PAGE", FALLBACK_PER_PAGE))


# =============================================================================
# Search Configuration
# =============================================================================

@dataclass
class SearchConfig:
    """Configuration for the upstream docs search endpoint."""

    base_url: str = DEFAULT_BASE_URL
    search_path: str = DEFAULT_SEARCH_PATH
    timeout_s: float = DEFAULT_TIMEOUT_S
    user_agent: str = DEFAULT_USER_AGENT

    # Applied when the caller omits page/per_page or passes garbage
    default_page: int = DEFAULT_PAGE
    default_per_page: int = DEFAULT_PER_PAGE

    extra_headers: Dict[str, str] = field(default_factory=dict)

    @property
    def search_url(self) -> str:
        return self.base_url.rstrip("/") + "/" + self.search_path.lstrip("/")

    @classmethod
    def from_env(cls) -> "SearchConfig":
        """Create config from the current environment."""
        return cls(
            base_url=os.getenv("DOCS_SEARCH_BASE_URL", FALLBACK_BASE_URL),
            search_path=os.getenv("DOCS_SEARCH_PATH", FALLBACK_SEARCH_PATH),
            timeout_s=float(os.getenv("DOCS_SEARCH_TIMEOUT_S", FALLBACK_TIMEOUT_S)),
            user_agent=os.getenv("DOCS_SEARCH_USER_AGENT", FALLBACK_USER_AGENT),
            default_page=int(os.getenv("DOCS_SEARCH_DEFAULT_PAGE", FALLBACK_PAGE)),
            default_per_page=int(os.getenv("DOCS_SEARCH_DEFAULT_PER_PAGE", FALLBACK_PER_PAGE)),
        )


def validate_config(config: Optional[SearchConfig] = None) -> None:
    """Validate a SearchConfig, raising ValueError that lists every problem."""
    config = config or SearchConfig()
    problems: List[str] = []
    if not config.base_url.startswith(("http://", "https://")):
        problems.append(f"base_url must be an http(s) URL, got {config.base_url!r}")
    if config.timeout_s <= 0:
        problems.append(f"timeout_s must be positive, got {config.timeout_s}")
    if config.default_page < 1:
        problems.append(f"default_page must be >= 1, got {config.default_page}")
    if config.default_per_page < 1:
        problems.append(f"default_per_page must be >= 1, got {config.default_per_page}")
    if problems:
        raise ValueError(f"Invalid search configuration: {'; '.join(problems)}")


# =============================================================================
# Logging
# =============================================================================

def configure_logging(level: str = "INFO") -> None:
    """Route loguru output to a single stderr sink at the given level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}",
        backtrace=False,
        diagnose=False,
    )
