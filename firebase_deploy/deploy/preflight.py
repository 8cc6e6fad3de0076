from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Mapping, Optional

from firebase_deploy.deploy.errors import SpawnError, WorkdirError
from firebase_deploy.deploy.payload import WorkspaceDescriptor


def resolve_workspace(workspace: WorkspaceDescriptor) -> Path:
    """Vérifie le dossier de travail et renvoie son chemin.

    Un chemin vide désigne le dossier courant du plugin.
    """

    if not workspace.path:
        return Path.cwd()

    path = Path(workspace.path).expanduser()
    if not path.exists():
        raise WorkdirError(f"Dossier de travail introuvable: {path}")
    if not path.is_dir():
        raise WorkdirError(f"Le dossier de travail n'est pas un répertoire: {path}")
    if not os.access(path, os.R_OK | os.X_OK):
        raise WorkdirError(f"Dossier de travail inaccessible: {path}")
    return path


def preflight_binary(binary: str, env: Optional[Mapping[str, str]] = None) -> str:
    """Vérifie que la CLI de déploiement est résolvable via le PATH fourni."""

    search_path = (env if env is not None else os.environ).get("PATH")
    resolved = shutil.which(binary, path=search_path)
    if not resolved:
        raise SpawnError(f"Binaire requis introuvable: {binary}")
    return resolved
