"""Runtime settings read from ``LETTERPLAY_*`` environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def default_public_root() -> Path:
    return Path(__file__).resolve().parent / "public"


@dataclass(frozen=True)
class Settings:
    public_root: Path
    audio_dir: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the environment, falling back to packaged defaults."""
        env = os.environ if environ is None else environ

        public_root = Path(env.get("LETTERPLAY_PUBLIC_ROOT") or default_public_root())
        audio_dir = Path(env.get("LETTERPLAY_AUDIO_DIR") or public_root / "audio")
        host = env.get("LETTERPLAY_HOST") or DEFAULT_HOST

        raw_port = env.get("LETTERPLAY_PORT") or str(DEFAULT_PORT)
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"LETTERPLAY_PORT must be an integer, got {raw_port!r}") from None
        if not 0 < port < 65536:
            raise ValueError(f"LETTERPLAY_PORT out of range: {port}")

        log_level = (env.get("LETTERPLAY_LOG_LEVEL") or "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"LETTERPLAY_LOG_LEVEL is not a logging level: {log_level!r}")

        return cls(
            public_root=public_root,
            audio_dir=audio_dir,
            host=host,
            port=port,
            log_level=log_level,
        )


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
    )
