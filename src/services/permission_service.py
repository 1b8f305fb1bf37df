import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

from src.database import models
from src.permissions.constants import ALL_PERMISSIONS, Permission, parse_permissions
from src.repositories.interfaces import IMembershipRepository, IRoleRepository, IUserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EffectivePermissions:
    """
    (사용자, 프로젝트) 쌍에 대해 계산된 실제 권한 집합입니다.

    하나의 요청 안에서 여러 번 검사해야 할 때, 한 번 계산한 결과를 재사용하여
    저장소 조회를 줄일 수 있습니다.
    """
    permissions: FrozenSet[Permission]
    membership: Optional[models.ProjectMember] = None
    is_system_admin: bool = False

    def has(self, permission: Permission) -> bool:
        return permission in self.permissions

    def has_any(self, permissions: Iterable[Permission]) -> bool:
        return any(p in self.permissions for p in permissions)

    def has_all(self, permissions: Iterable[Permission]) -> bool:
        return all(p in self.permissions for p in permissions)


class PermissionService:
    """프로젝트 범위의 권한을 계산하고 판정하는 서비스를 제공합니다."""

    def __init__(self, user_repo: IUserRepository, membership_repo: IMembershipRepository, role_repo: IRoleRepository):
        """
        PermissionService를 초기화합니다.

        Args:
            user_repo: 시스템 관리자 여부 확인에 사용할 리포지토리.
            membership_repo: 프로젝트 멤버십(역할 포함) 조회에 사용할 리포지토리.
            role_repo: 역할 조회에 사용할 리포지토리.
        """
        self.user_repo = user_repo
        self.membership_repo = membership_repo
        self.role_repo = role_repo

    def get_effective_permissions(self, user_id: int, project_id: int) -> EffectivePermissions:
        """
        사용자가 프로젝트에서 가지는 실제 권한 집합을 계산합니다.

        시스템 관리자는 멤버십 행의 존재 여부와 관계없이 모든 프로젝트에서
        최상위 역할을 가진 가상 멤버로 취급되며, 이 경우 멤버십은 조회하지 않습니다.
        일반 사용자는 역할 권한과 멤버별 추가 권한(overrides)의 합집합을 가집니다.
        """
        if self.user_repo.is_system_admin(user_id):
            logger.debug("User %s is a system admin; granting all permissions on project %s", user_id, project_id)
            return EffectivePermissions(frozenset(ALL_PERMISSIONS), None, True)

        membership = self.membership_repo.find_membership(user_id, project_id)
        if not membership:
            return EffectivePermissions(frozenset(), None, False)

        role_permissions = membership.role.permission_list
        override_permissions = parse_permissions(membership.overrides)
        return EffectivePermissions(frozenset(role_permissions) | frozenset(override_permissions), membership, False)

    def is_member(self, user_id: int, project_id: int) -> bool:
        """프로젝트 멤버인지 확인합니다. 시스템 관리자는 항상 멤버입니다."""
        effective = self.get_effective_permissions(user_id, project_id)
        return effective.is_system_admin or effective.membership is not None

    def has_permission(self, user_id: int, project_id: int, permission: Permission) -> bool:
        return self.get_effective_permissions(user_id, project_id).has(permission)

    def has_any_permission(self, user_id: int, project_id: int, permissions: Iterable[Permission]) -> bool:
        """주어진 권한 중 하나라도 가지고 있으면 True. 빈 목록이면 False입니다."""
        return self.get_effective_permissions(user_id, project_id).has_any(permissions)

    def has_all_permissions(self, user_id: int, project_id: int, permissions: Iterable[Permission]) -> bool:
        """주어진 권한을 모두 가지고 있으면 True. 빈 목록이면 True입니다."""
        return self.get_effective_permissions(user_id, project_id).has_all(permissions)

    def get_role_permissions(self, role_id: int) -> List[Permission]:
        role = self.role_repo.find_by_id(role_id)
        if not role:
            return []
        return role.permission_list

    def get_role_position(self, user_id: int, project_id: int) -> Optional[int]:
        """사용자 역할의 순위를 반환합니다. 멤버십이 없으면 None."""
        membership = self.membership_repo.find_membership(user_id, project_id)
        if not membership:
            return None
        return membership.role.position
