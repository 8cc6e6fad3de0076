from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from firebase_deploy.deploy.commands import FIREBASE_BINARY

BINARY_ENV = "FIREBASE_PLUGIN_BINARY"
BUILD_COMMIT_ENV = "FIREBASE_PLUGIN_BUILD_COMMIT"
LOG_DIR_ENV = "FIREBASE_PLUGIN_LOG_DIR"


@dataclass(frozen=True)
class RunnerSettings:
    binary: str = FIREBASE_BINARY
    build_commit: str = "unknown"
    logs_dir: Optional[Path] = None


def load_settings(env: Mapping[str, str] | None = None) -> RunnerSettings:
    """Configuration du runner lue depuis les variables d'environnement."""

    env = env if env is not None else os.environ
    logs_dir = env.get(LOG_DIR_ENV, "").strip()

    return RunnerSettings(
        binary=env.get(BINARY_ENV, "").strip() or FIREBASE_BINARY,
        build_commit=env.get(BUILD_COMMIT_ENV, "").strip() or "unknown",
        logs_dir=Path(logs_dir).expanduser() if logs_dir else None,
    )
