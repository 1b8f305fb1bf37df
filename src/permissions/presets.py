# src/permissions/presets.py
"""
프로젝트 생성 시 만들어지는 기본 역할(Owner, Admin, Member)의 구성입니다.
기본 역할은 is_default=True로 생성되며 삭제할 수 없습니다.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

from src.permissions.constants import ALL_PERMISSIONS, Permission

OWNER = "Owner"
ADMIN = "Admin"
MEMBER = "Member"

DEFAULT_ROLE_NAMES: Tuple[str, ...] = (OWNER, ADMIN, MEMBER)

ROLE_COLORS: Dict[str, str] = {
    OWNER: "#f59e0b",
    ADMIN: "#3b82f6",
    MEMBER: "#6b7280",
}

ROLE_DESCRIPTIONS: Dict[str, str] = {
    OWNER: "Full control over the project including deletion and permission management",
    ADMIN: "Can manage most project settings, members, and content",
    MEMBER: "Can create tickets and manage their own content",
}

# 각 역할의 권한은 명시적으로 나열합니다. (상위 역할로부터 암묵적으로 상속하지 않음)
ROLE_PRESETS: Dict[str, Tuple[Permission, ...]] = {
    OWNER: ALL_PERMISSIONS,
    # PROJECT_DELETE, MEMBERS_ADMIN 제외
    ADMIN: (
        Permission.PROJECT_SETTINGS,
        Permission.MEMBERS_INVITE,
        Permission.MEMBERS_MANAGE,
        Permission.BOARD_MANAGE,
        Permission.TICKETS_CREATE,
        Permission.TICKETS_MANAGE_OWN,
        Permission.TICKETS_MANAGE_ANY,
        Permission.SPRINTS_MANAGE,
        Permission.LABELS_MANAGE,
        Permission.COMMENTS_MANAGE_ANY,
        Permission.ATTACHMENTS_MANAGE_ANY,
    ),
    MEMBER: (
        Permission.TICKETS_CREATE,
        Permission.TICKETS_MANAGE_OWN,
    ),
}

# 역할 순위 (값이 작을수록 높은 권한)
ROLE_POSITIONS: Dict[str, int] = {
    OWNER: 0,
    ADMIN: 1,
    MEMBER: 2,
}


@dataclass(frozen=True)
class DefaultRoleConfig:
    name: str
    color: str
    description: str
    permissions: Tuple[Permission, ...]
    position: int
    is_default: bool = True


def get_default_role_configs() -> List[DefaultRoleConfig]:
    """기본 역할 생성에 사용할 구성 목록을 순위 순서대로 반환합니다."""
    return [
        DefaultRoleConfig(
            name=name,
            color=ROLE_COLORS[name],
            description=ROLE_DESCRIPTIONS[name],
            permissions=ROLE_PRESETS[name],
            position=ROLE_POSITIONS[name],
        )
        for name in DEFAULT_ROLE_NAMES
    ]


def get_default_role_permissions(role_name: str) -> List[Permission]:
    # 알 수 없는 역할 이름은 권한 없음으로 취급
    return list(ROLE_PRESETS.get(role_name, ()))


def is_default_role_name(name: str) -> bool:
    return name in DEFAULT_ROLE_NAMES


def map_legacy_role_to_default_name(legacy_role: str) -> str:
    """이전 문자열 기반 역할(owner/admin/member)을 기본 역할 이름으로 변환합니다."""
    legacy = (legacy_role or "").lower()
    if legacy == "owner":
        return OWNER
    if legacy == "admin":
        return ADMIN
    return MEMBER
