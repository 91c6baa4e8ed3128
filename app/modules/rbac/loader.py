"""
Load and dump the role -> permission table as YAML.

File layout (same as the shared permissions.yml used by every service):

    rbac:
      version: <sha256 fingerprint, informational>
      roles:
        ROLE_USER: [USER_READ, PRJ_READ, ...]
"""

import logging
from pathlib import Path
from typing import Union

import yaml

from app.config.permissions_config import ROLE_PERMISSIONS
from app.modules.rbac.models import RolePermissionTable

logger = logging.getLogger(__name__)


class RoleTableError(ValueError):
    """Raised when a role table file is structurally malformed."""


def default_role_table() -> RolePermissionTable:
    return RolePermissionTable(ROLE_PERMISSIONS)


def load_role_table(path: Union[str, Path]) -> RolePermissionTable:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            document = yaml.safe_load(fh)
    except yaml.YAMLError as e:
        raise RoleTableError(f"Role table {path} is not valid YAML: {e}") from e

    if not isinstance(document, dict) or not isinstance(document.get("rbac"), dict):
        raise RoleTableError(f"Role table {path} must contain a top-level 'rbac' mapping")

    roles = document["rbac"].get("roles")
    if not isinstance(roles, dict):
        raise RoleTableError(f"Role table {path} must define 'rbac.roles' as a mapping")

    for role, permissions in roles.items():
        if permissions is None:
            roles[role] = []
            continue
        if not isinstance(permissions, list) or not all(isinstance(p, str) for p in permissions):
            raise RoleTableError(f"Permissions of role '{role}' in {path} must be a list of strings")

    table = RolePermissionTable(roles)

    declared = document["rbac"].get("version")
    if declared and declared != table.version:
        logger.warning(f"Role table {path} declares version {declared} but its content hashes to {table.version}")

    logger.info(f"Loaded role table from {path}: {len(table)} roles, version {table.version[:12]}")
    return table


def dump_role_table(table: RolePermissionTable, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    document = {
        "rbac": {
            "version": table.version,
            "roles": table.to_dict(),
        }
    }
    with path.open("w", encoding="utf-8") as fh:
        yaml.safe_dump(document, fh, sort_keys=False, default_flow_style=False)
    return path
