"""Centralised settings for the link checker.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from linkcheck import __version__

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Scheduler
    # ------------------------------------------------------------------
    max_concurrency: int = field(
        default_factory=lambda: int(os.environ.get("LINKCHECK_MAX_CONCURRENCY", "10"))
    )

    # ------------------------------------------------------------------
    # Prober
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("LINKCHECK_REQUEST_TIMEOUT", "120.0"))
    )
    max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("LINKCHECK_MAX_REDIRECTS", "20"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "LINKCHECK_USER_AGENT", f"linkcheck/{__version__}"
        )
    )

    # ------------------------------------------------------------------
    # Input / output files
    # ------------------------------------------------------------------
    input_path: Path = field(
        default_factory=lambda: Path(os.environ.get("LINKCHECK_INPUT", "job-links.txt"))
    )
    output_path: Path = field(
        default_factory=lambda: Path(os.environ.get("LINKCHECK_OUTPUT", "output.txt"))
    )

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ``ValueError`` if any limit is out of range."""
        if self.max_concurrency < 1:
            raise ValueError(
                f"max_concurrency must be at least 1, got {self.max_concurrency}"
            )
        if self.request_timeout <= 0:
            raise ValueError(
                f"request_timeout must be positive, got {self.request_timeout}"
            )
        if self.max_redirects < 0:
            raise ValueError(
                f"max_redirects must not be negative, got {self.max_redirects}"
            )


# Module-level singleton — import this everywhere:
#   from linkcheck.config import settings
settings = Settings()
