import logging
from typing import Dict, Optional

from src.database import models
from src.permissions.constants import serialize_permissions
from src.permissions.presets import MEMBER, OWNER, ROLE_POSITIONS, get_default_role_configs
from src.repositories.interfaces import IRoleRepository
from src.services.exceptions import RoleProvisioningError

logger = logging.getLogger(__name__)


class RoleProvisioningService:
    """프로젝트 생성 시 기본 역할(Owner, Admin, Member)을 만들고 조회하는 서비스를 제공합니다."""

    def __init__(self, role_repo: IRoleRepository):
        self.role_repo = role_repo

    def create_default_roles_for_project(self, project_id: int) -> Dict[str, int]:
        """
        프로젝트에 기본 역할들을 생성합니다.

        Args:
            project_id: 역할을 생성할 프로젝트의 ID.

        Returns:
            기본 역할 이름과 생성된 역할 ID를 매핑한 딕셔너리.
            (예: {'Owner': 1, 'Admin': 2, 'Member': 3})
        """
        role_map: Dict[str, int] = {}
        for config in get_default_role_configs():
            role = self.role_repo.create(models.Role(
                project_id=project_id,
                name=config.name,
                color=config.color,
                description=config.description,
                permissions=serialize_permissions(config.permissions),
                is_default=config.is_default,
                position=config.position,
            ))
            role_map[config.name] = role.id

        logger.info("Created default roles %s for project %s", sorted(role_map), project_id)
        return role_map

    def get_owner_role_for_project(self, project_id: int) -> int:
        """
        프로젝트의 Owner 역할 ID를 반환합니다. 기본 역할이 없으면 새로 생성합니다.

        이름이 바뀐 기본 역할도 찾을 수 있도록 이름 대신 순위로 조회합니다.

        Raises:
            RoleProvisioningError: 기본 역할을 생성했는데도 Owner 역할을 얻지 못했을 때.
        """
        return self._get_or_create_default_role(project_id, OWNER)

    def get_member_role_for_project(self, project_id: int) -> int:
        """초대된 사용자에게 부여되는 Member 역할 ID를 반환합니다. 없으면 기본 역할을 생성합니다."""
        return self._get_or_create_default_role(project_id, MEMBER)

    def get_role_by_name(self, project_id: int, role_name: str) -> Optional[models.Role]:
        return self.role_repo.find_by_name(project_id, role_name)

    def _get_or_create_default_role(self, project_id: int, role_name: str) -> int:
        role = self.role_repo.find_default_by_position(project_id, ROLE_POSITIONS[role_name])
        if role:
            return role.id

        role_id = self.create_default_roles_for_project(project_id).get(role_name)
        if role_id is None:
            raise RoleProvisioningError(f"Failed to create {role_name} role for project '{project_id}'.")
        return role_id
