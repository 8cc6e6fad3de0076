"""Erreurs fonctionnelles du plugin de déploiement Firebase."""
from __future__ import annotations

from typing import List


class DeployError(Exception):
    """Erreur fonctionnelle lors d'un déploiement."""


class InputError(DeployError):
    """Payload du plugin illisible ou incomplet."""


class MissingFieldError(InputError):
    def __init__(self, field: str) -> None:
        super().__init__(f"'{field}' does not exist in JSON dictionary")
        self.field = field


class DecodeError(InputError):
    pass


class ValidationError(DeployError):
    """Payload bien formé mais refusé (token vide)."""


class WorkdirError(DeployError):
    pass


class SpawnError(DeployError):
    """Le binaire de déploiement n'a pas pu être lancé."""


class ExecutionError(DeployError):
    """La commande externe s'est terminée avec un code non nul."""

    def __init__(self, command: List[str], returncode: int) -> None:
        super().__init__(f"Commande échouée ({returncode}): {' '.join(command)}")
        self.command = list(command)
        self.returncode = returncode
