from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

from firebase_deploy.deploy.commands import Command
from firebase_deploy.deploy.errors import ExecutionError, SpawnError

LOGGER_NAME = "firebase_deploy"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def build_logger(
    logs_dir: Optional[Path] = None,
    log_filename: str = "deploy.log",
    debug: bool = False,
) -> logging.Logger:
    """Logger du plugin : console brute sur stdout, fichier horodaté si `logs_dir` est fourni."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # la console suit le sys.stdout courant
    for handler in [h for h in logger.handlers if type(h) is logging.StreamHandler]:
        logger.removeHandler(handler)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(stream_handler)

    if logs_dir is not None:
        logs_dir.mkdir(parents=True, exist_ok=True)
        log_file = logs_dir / log_filename
        if not any(
            isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(log_file)
            for handler in logger.handlers
        ):
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
            logger.addHandler(file_handler)

    return logger


def run_command(command: Command, logger: logging.Logger, *, debug: bool = False, dry_run: bool = False) -> None:
    """Trace puis exécute une commande, stdout/stderr hérités du plugin.

    Raises:
        SpawnError: le binaire est introuvable, non exécutable, ou la commande est invalide.
        ExecutionError: la commande retourne un code non nul.
    """

    if debug or dry_run:
        logger.info("$ %s", " ".join(command.argv))
    if dry_run:
        return

    try:
        result = subprocess.run(command.argv, cwd=command.cwd, env=command.env, check=False)
    except (OSError, ValueError) as exc:
        # ValueError : octet nul dans un argument ou une variable d'environnement
        raise SpawnError(f"Impossible de lancer {command.binary}: {exc}") from exc

    if result.returncode != 0:
        logger.error("Commande échouée (%s): %s", result.returncode, " ".join(command.argv))
        raise ExecutionError(command.argv, result.returncode)
