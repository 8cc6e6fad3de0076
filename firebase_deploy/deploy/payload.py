"""Lecture du payload JSON transmis par le pipeline CI.

Le pipeline passe un objet JSON complet (system, repo, build, workspace, vargs...).
Seules deux clés sont consommées :
- `workspace` : décrit le dossier de travail (`path`)
- `vargs` : paramètres du plugin (token, projet, cibles, message, dryrun, debug)

Chaque fragment est décodé en une seule passe typée ; les erreurs pydantic sont
converties en `DecodeError` pour que l'appelant ne manipule que la hiérarchie
`DeployError`.
"""
from __future__ import annotations

import json
from typing import IO, Any, Dict, Tuple, Type, TypeVar, Union

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator, model_validator

from firebase_deploy.deploy.errors import DecodeError, MissingFieldError, ValidationError

WORKSPACE_KEY = "workspace"
VARGS_KEY = "vargs"

_Model = TypeVar("_Model", bound="_PayloadModel")


class _PayloadModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null vaut absence de valeur : le champ garde son défaut
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class WorkspaceDescriptor(_PayloadModel):
    """Dossier de travail dans lequel la CLI firebase est lancée."""

    path: StrictStr = ""


class DeploymentParameters(_PayloadModel):
    """Paramètres `vargs` du plugin."""

    token: StrictStr = Field(default="", repr=False)
    project_id: StrictStr = ""
    message: StrictStr = ""
    targets: StrictStr = ""
    dryrun: StrictBool = False
    debug: StrictBool = False

    @field_validator("token", "message")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


def parse_payload(raw: Union[str, bytes]) -> Tuple[WorkspaceDescriptor, DeploymentParameters]:
    """Décode et valide le payload du plugin.

    Args:
        raw: document JSON tel que reçu en argument du plugin.

    Returns:
        Le couple (workspace, paramètres) validé.

    Raises:
        DecodeError: JSON invalide, racine qui n'est pas un objet, ou type inattendu.
        MissingFieldError: clé `workspace` ou `vargs` absente.
        ValidationError: token vide après suppression des espaces.
    """

    try:
        document = json.loads(raw)
    except ValueError as exc:
        raise DecodeError(f"JSON invalide: {exc}") from exc

    if not isinstance(document, dict):
        raise DecodeError("Le payload doit être un objet JSON")

    workspace = _decode_fragment(WORKSPACE_KEY, document, WorkspaceDescriptor)
    params = _decode_fragment(VARGS_KEY, document, DeploymentParameters)

    if not params.token:
        raise ValidationError("token must not be empty")

    return workspace, params


def load_payload(stream: IO) -> Tuple[WorkspaceDescriptor, DeploymentParameters]:
    return parse_payload(stream.read())


def _decode_fragment(key: str, document: Dict[str, Any], model: Type[_Model]) -> _Model:
    if key not in document:
        raise MissingFieldError(key)

    fragment = document[key]
    if fragment is None:
        fragment = {}

    try:
        return model.model_validate(fragment)
    except pydantic.ValidationError as exc:
        raise DecodeError(f"Unable to unmarshal '{key}': {exc}") from exc
