from src.permissions.constants import (
    ALL_PERMISSIONS,
    Permission,
    PermissionCategory,
    is_valid_permission,
    parse_permissions,
    serialize_permissions,
)
from src.permissions.presets import (
    DEFAULT_ROLE_NAMES,
    ROLE_POSITIONS,
    ROLE_PRESETS,
    get_default_role_configs,
)
