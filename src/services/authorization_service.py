import logging
from typing import Iterable, Optional

from src.permissions.constants import Permission
from src.services.permission_service import PermissionService
from src.services.exceptions import ForbiddenError

logger = logging.getLogger(__name__)


class AuthorizationService:
    """
    권한 검사에 실패하면 ForbiddenError를 발생시키는 강제(require) 함수들을 제공합니다.
    성공 시에는 아무 값도 반환하지 않습니다.
    """

    def __init__(self, permission_service: PermissionService):
        self.permission_service = permission_service

    def require_permission(self, user_id: int, project_id: int, permission: Permission):
        """
        사용자가 특정 권한을 가지고 있는지 확인합니다.

        Raises:
            ForbiddenError: 권한이 없을 때. (permission 속성에 누락된 권한 태그가 담김)
        """
        if not self.permission_service.has_permission(user_id, project_id, permission):
            logger.info("Denied user %s on project %s: missing %s", user_id, project_id, permission)
            raise ForbiddenError(f"Forbidden: Missing permission {permission!s}", permission=permission)

    def require_any_permission(self, user_id: int, project_id: int, permissions: Iterable[Permission]):
        """
        주어진 권한 중 하나 이상을 가지고 있는지 확인합니다.

        Raises:
            ForbiddenError: 어떤 권한도 가지고 있지 않을 때. (permission 속성에 요구된 권한 태그들의 튜플이 담김)
        """
        permissions = tuple(permissions)
        if not self.permission_service.has_any_permission(user_id, project_id, permissions):
            logger.info("Denied user %s on project %s: none of %s", user_id, project_id, [str(p) for p in permissions])
            raise ForbiddenError("Forbidden: Missing required permissions", permission=permissions)

    def require_membership(self, user_id: int, project_id: int):
        """
        프로젝트 범위 리소스를 읽기 위한 최소 조건(멤버십)을 확인합니다.

        Raises:
            ForbiddenError: 프로젝트 멤버가 아닐 때.
        """
        if not self.permission_service.is_member(user_id, project_id):
            logger.info("Denied user %s on project %s: not a member", user_id, project_id)
            raise ForbiddenError("Forbidden: Not a project member")

    def require_resource_permission(
        self,
        user_id: int,
        project_id: int,
        resource_owner_id: Optional[int],
        own_permission: Permission,
        any_permission: Permission,
    ):
        """
        소유자 기반 리소스 권한을 확인합니다. 본인 리소스라도 own_permission이 필요합니다.

        1. 시스템 관리자이거나 any_permission이 있으면 허용합니다.
        2. 본인 리소스이고 own_permission이 있으면 허용합니다.
        3. 그 외에는 거부합니다. 소유자가 없는(None) 이전 데이터는 any_permission으로만 허용됩니다.

        Raises:
            ForbiddenError: 위 조건을 만족하지 못할 때. 본인 리소스면 own_permission,
                아니면 any_permission이 permission 속성에 담깁니다.
        """
        effective = self.permission_service.get_effective_permissions(user_id, project_id)
        if effective.is_system_admin or effective.has(any_permission):
            return
        is_owner = resource_owner_id is not None and resource_owner_id == user_id
        if is_owner and effective.has(own_permission):
            return

        logger.info(
            "Denied user %s on project %s: cannot modify resource owned by %s", user_id, project_id, resource_owner_id
        )
        raise ForbiddenError(
            "Forbidden: Missing permission to modify this resource",
            permission=own_permission if is_owner else any_permission,
        )

    def require_ticket_permission(self, user_id: int, project_id: int, creator_id: Optional[int], action: str = "edit"):
        """
        티켓 수정/삭제 권한을 확인합니다. (tickets.manage_own / tickets.manage_any)

        action("edit" 또는 "delete")은 로그에만 남으며 판정에는 영향을 주지 않습니다.
        """
        logger.debug("Checking ticket %s permission for user %s on project %s", action, user_id, project_id)
        self.require_resource_permission(
            user_id, project_id, creator_id, Permission.TICKETS_MANAGE_OWN, Permission.TICKETS_MANAGE_ANY
        )

    def require_comment_permission(self, user_id: int, project_id: int, author_id: Optional[int], action: str = "edit"):
        """
        댓글 수정/삭제 권한을 확인합니다.
        작성자 본인은 역할과 관계없이 항상 허용되며, 이 경우 권한 조회를 하지 않습니다.
        action은 거부 로그에만 쓰입니다.
        """
        self._require_authored_or_moderator(
            user_id, project_id, author_id, Permission.COMMENTS_MANAGE_ANY, action, "Forbidden: Cannot modify this comment"
        )

    def require_attachment_permission(
        self, user_id: int, project_id: int, uploader_id: Optional[int], action: str = "delete"
    ):
        """첨부파일 삭제 권한을 확인합니다. 업로드한 본인은 항상 허용됩니다. (action은 로그용)"""
        self._require_authored_or_moderator(
            user_id, project_id, uploader_id, Permission.ATTACHMENTS_MANAGE_ANY, action,
            "Forbidden: Cannot delete this attachment"
        )

    def _require_authored_or_moderator(
        self,
        user_id: int,
        project_id: int,
        author_id: Optional[int],
        moderate_permission: Permission,
        action: str,
        message: str,
    ):
        if author_id is not None and author_id == user_id:
            return

        effective = self.permission_service.get_effective_permissions(user_id, project_id)
        if effective.is_system_admin or effective.has(moderate_permission):
            return

        logger.info(
            "Denied user %s on project %s: cannot %s content authored by %s", user_id, project_id, action, author_id
        )
        raise ForbiddenError(message, permission=moderate_permission)
