import logging

from app.config.settings import settings
from app.modules.rbac.loader import default_role_table, load_role_table
from app.modules.rbac.service import PermissionResolver

logger = logging.getLogger(__name__)


class ResolverProvider:
    _resolver: PermissionResolver = None

    @classmethod
    def get_resolver(cls) -> PermissionResolver:
        if cls._resolver is None:
            if settings.rbac_table_path:
                table = load_role_table(settings.rbac_table_path)
            else:
                table = default_role_table()
            cls._resolver = PermissionResolver(table)
            logger.info(f"Permission resolver ready with role table version {table.version[:12]}")
        return cls._resolver

    @classmethod
    def reset_resolver(cls):
        """Drop the cached resolver; the next call rebuilds it from the current table source."""
        cls._resolver = None


def get_permission_resolver() -> PermissionResolver:
    return ResolverProvider.get_resolver()
