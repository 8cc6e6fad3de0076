"""Déploiement Firebase piloté par le pipeline CI.

Ce module enchaîne un chemin unique et simple :
- vérification du dossier de travail (`workspace.path`)
- vérification de la présence de la CLI `firebase` (hors dry-run)
- `firebase use <project_id>` si un projet est demandé
- `firebase deploy [--only ...] [--message ...]`

Le token et le mode debug sont transmis par l'environnement du process enfant,
jamais par les arguments. Le dossier et l'environnement sont passés
explicitement aux commandes : l'état global du process n'est pas modifié.
La première erreur interrompt la séquence, sans rollback.
"""
from __future__ import annotations

import logging
from typing import Mapping, Optional

from firebase_deploy.deploy.commands import FIREBASE_BINARY, build_deploy, build_use, should_select_project
from firebase_deploy.deploy.payload import DeploymentParameters, WorkspaceDescriptor
from firebase_deploy.deploy.preflight import preflight_binary, resolve_workspace
from firebase_deploy.logging.logger import run_command


def deploy_up(
    workspace: WorkspaceDescriptor,
    params: DeploymentParameters,
    logger: logging.Logger,
    *,
    base_env: Optional[Mapping[str, str]] = None,
    binary: str = FIREBASE_BINARY,
) -> None:
    """Lance le déploiement décrit par le payload.

    Args:
        workspace: dossier dans lequel la CLI est exécutée.
        params: paramètres validés du plugin.
        logger: logger du plugin (trace des commandes).
        base_env: environnement de départ du process enfant (os.environ par défaut).
        binary: nom ou chemin de la CLI firebase.

    Raises:
        WorkdirError: dossier de travail inaccessible.
        SpawnError: CLI introuvable ou non exécutable.
        ExecutionError: une commande retourne un code non nul.
    """

    logger.info("Changing to path: %s", workspace.path)
    workdir = resolve_workspace(workspace)

    if not params.dryrun:
        preflight_binary(binary, base_env)

    if should_select_project(params):
        use = build_use(params, base_env, binary=binary, cwd=workdir)
        run_command(use, logger, debug=params.debug, dry_run=params.dryrun)

    deploy = build_deploy(params, base_env, binary=binary, cwd=workdir)
    run_command(deploy, logger, debug=params.debug, dry_run=params.dryrun)

    logger.debug("Déploiement terminé (projet=%s, cibles=%s)", params.project_id or "défaut", params.targets or "toutes")
