from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from firebase_deploy.deploy.payload import DeploymentParameters

FIREBASE_BINARY = "firebase"
TOKEN_ENV = "FIREBASE_TOKEN"
DEBUG_ENV = "DEBUG"


@dataclass(frozen=True)
class Command:
    args: List[str]
    env: Dict[str, str]
    binary: str = FIREBASE_BINARY
    cwd: Optional[Path] = None

    @property
    def argv(self) -> List[str]:
        return [self.binary, *self.args]

    def env_entries(self) -> List[str]:
        return [f"{key}={value}" for key, value in self.env.items()]


def should_select_project(params: DeploymentParameters) -> bool:
    return params.project_id != ""


def build_environment(params: DeploymentParameters, base_env: Mapping[str, str] | None = None) -> Dict[str, str]:
    """Environnement du process enfant : token et debug remplacent ceux hérités."""

    if base_env is None:
        base_env = os.environ

    env = {key: value for key, value in base_env.items() if key not in (DEBUG_ENV, TOKEN_ENV)}
    env[TOKEN_ENV] = params.token
    if params.debug:
        env[DEBUG_ENV] = "true"
    return env


def build_use(
    params: DeploymentParameters,
    base_env: Mapping[str, str] | None = None,
    binary: str = FIREBASE_BINARY,
    cwd: Path | None = None,
) -> Command:
    """$ firebase use [project_id]"""

    args = ["use"]
    if params.project_id:
        args.append(params.project_id)

    return Command(args=args, env=build_environment(params, base_env), binary=binary, cwd=cwd)


def build_deploy(
    params: DeploymentParameters,
    base_env: Mapping[str, str] | None = None,
    binary: str = FIREBASE_BINARY,
    cwd: Path | None = None,
) -> Command:
    """$ firebase deploy [--only targets] [--message "message"]"""

    args = ["deploy"]
    if params.targets:
        args.extend(["--only", params.targets])
    if params.message:
        # guillemets textuels, pas d'échappement shell
        args.extend(["--message", f'"{params.message}"'])

    return Command(args=args, env=build_environment(params, base_env), binary=binary, cwd=cwd)
