from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(slots=True)
class ApiSettings:
    """Runtime configuration for the meeting finder API."""

    title: str = "Meeting Finder API"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ApiSettings":
        environ = os.environ if environ is None else environ
        return cls(
            title=environ.get("MEETING_API_TITLE", "Meeting Finder API"),
            log_level=environ.get("LOG_LEVEL", "INFO"),
        )
