"""Point d'entrée du plugin Firebase pour le pipeline CI.

Usage : firebase-deploy '<payload JSON>'
"""
from __future__ import annotations

import sys
from typing import List, Mapping, Optional

from firebase_deploy.deploy.deploy_up import deploy_up
from firebase_deploy.deploy.errors import DeployError
from firebase_deploy.deploy.payload import parse_payload
from firebase_deploy.logging.logger import build_logger
from runner.settings import load_settings


def main(argv: Optional[List[str]] = None, env: Optional[Mapping[str, str]] = None) -> int:
    settings = load_settings(env)
    print(f"Firebase Plugin for Drone built from {settings.build_commit}")

    args = sys.argv[1:] if argv is None else argv
    if len(args) < 1:
        print("Firebase: Too few arguments.")
        return 1

    try:
        workspace, params = parse_payload(args[0])
    except DeployError as exc:
        print(f"Firebase: Unable to parse invalid plugin input: {exc}")
        return 1

    logger = build_logger(settings.logs_dir, debug=params.debug)
    if params.debug:
        logger.info("Workspace data: %r", workspace)
        logger.info("Firebase plugin data: %r", params)

    try:
        deploy_up(workspace, params, logger, base_env=env, binary=settings.binary)
    except DeployError as exc:
        print(f"Firebase: Error in deployment: {exc}")
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
