import logging

from src.permissions.constants import Permission
from src.repositories.interfaces import IRoleRepository
from src.services.permission_service import PermissionService

logger = logging.getLogger(__name__)

# 다른 멤버의 역할을 바꾸거나 내보내기 위해 필요한 권한 (하나 이상)
MEMBER_MANAGEMENT_PERMISSIONS = (Permission.MEMBERS_MANAGE, Permission.MEMBERS_ADMIN)


class RoleHierarchyService:
    """
    역할 순위(position)를 기준으로 멤버 관리와 역할 부여 가능 여부를 판정합니다.

    자신과 같거나 더 높은 권한을 가진 사용자를 관리하거나, 그런 역할을 부여하는 것을
    막아 권한 상승을 방지합니다. 역할 이름은 비교에 사용하지 않으므로 이름이 바뀐 기본 역할이나
    사용자 정의 역할도 동일하게 동작합니다. 모든 메서드는 예외 없이 bool만 반환합니다.
    """

    def __init__(self, permission_service: PermissionService, role_repo: IRoleRepository):
        self.permission_service = permission_service
        self.role_repo = role_repo

    def can_manage_member(self, actor_user_id: int, target_user_id: int, project_id: int) -> bool:
        """
        actor가 target의 멤버십(역할 변경, 제거)을 관리할 수 있는지 확인합니다.

        자기 자신은 Owner라도 관리할 수 없으며, actor의 역할이 target보다
        엄격하게 높은 순위(더 작은 position)여야 합니다.
        """
        if actor_user_id == target_user_id:
            return False

        actor = self.permission_service.get_effective_permissions(actor_user_id, project_id)
        if actor.is_system_admin:
            return True
        if not actor.has_any(MEMBER_MANAGEMENT_PERMISSIONS):
            return False
        if actor.membership is None:
            return False

        target_position = self.permission_service.get_role_position(target_user_id, project_id)
        if target_position is None:
            return False

        allowed = actor.membership.role.position < target_position
        if not allowed:
            logger.debug(
                "User %s (position %s) cannot manage user %s (position %s) on project %s",
                actor_user_id, actor.membership.role.position, target_user_id, target_position, project_id,
            )
        return allowed

    def can_assign_role(self, actor_user_id: int, project_id: int, role_id: int) -> bool:
        """
        actor가 특정 역할을 다른 멤버에게 부여할 수 있는지 확인합니다.

        부여할 역할은 actor 자신의 역할보다 엄격하게 낮은 순위(더 큰 position)여야 합니다.
        따라서 Owner 역할을 두 번째 사용자에게 부여하는 소유권 이전은 이 검사로 허용되지 않습니다.
        """
        actor = self.permission_service.get_effective_permissions(actor_user_id, project_id)
        if actor.is_system_admin:
            return True
        if not actor.has_any(MEMBER_MANAGEMENT_PERMISSIONS):
            return False
        if actor.membership is None:
            return False

        role = self.role_repo.find_by_id(role_id)
        if role is None or role.project_id != project_id:
            return False

        return role.position > actor.membership.role.position
