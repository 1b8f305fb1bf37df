# tests/services/test_role_hierarchy_service.py
import json
import pytest
from unittest.mock import MagicMock

from src.services.permission_service import PermissionService
from src.services.role_hierarchy_service import RoleHierarchyService
from src.repositories.interfaces import IUserRepository, IMembershipRepository, IRoleRepository
from src.permissions.constants import Permission
from src.permissions.presets import ROLE_PRESETS, ROLE_POSITIONS, OWNER, ADMIN, MEMBER
from src.database import models

PROJECT_ID = 10
OTHER_PROJECT_ID = 20
OWNER_ID, ADMIN_ID, ADMIN2_ID, MEMBER_ID, SYSADMIN_ID, OUTSIDER_ID = 1, 2, 3, 4, 5, 6

def make_role(role_id, name, position, permissions, project_id=PROJECT_ID) -> models.Role:
    return models.Role(id=role_id, project_id=project_id, name=name, position=position, is_default=True,
                       permissions=json.dumps([str(p) for p in permissions]))

ROLES = {
    101: make_role(101, OWNER, ROLE_POSITIONS[OWNER], ROLE_PRESETS[OWNER]),
    102: make_role(102, ADMIN, ROLE_POSITIONS[ADMIN], ROLE_PRESETS[ADMIN]),
    103: make_role(103, MEMBER, ROLE_POSITIONS[MEMBER], ROLE_PRESETS[MEMBER]),
    # 다른 프로젝트에 속한 역할
    201: make_role(201, MEMBER, ROLE_POSITIONS[MEMBER], ROLE_PRESETS[MEMBER], project_id=OTHER_PROJECT_ID),
}

MEMBER_ROLE_IDS = {OWNER_ID: 101, ADMIN_ID: 102, ADMIN2_ID: 102, MEMBER_ID: 103}

def find_membership(user_id, project_id):
    """MEMBER_ROLE_IDS 표를 기반으로 멤버십 조회를 흉내 냅니다."""
    role_id = MEMBER_ROLE_IDS.get(user_id)
    if project_id != PROJECT_ID or role_id is None:
        return None
    member = models.ProjectMember(user_id=user_id, project_id=project_id, role_id=role_id)
    member.role = ROLES[role_id]
    return member

# ===================================================================
#  Fixture 설정
# ===================================================================

@pytest.fixture
def mock_user_repo() -> MagicMock:
    repo = MagicMock(spec=IUserRepository)
    repo.is_system_admin.side_effect = lambda user_id: user_id == SYSADMIN_ID
    return repo

@pytest.fixture
def mock_membership_repo() -> MagicMock:
    repo = MagicMock(spec=IMembershipRepository)
    repo.find_membership.side_effect = find_membership
    return repo

@pytest.fixture
def mock_role_repo() -> MagicMock:
    repo = MagicMock(spec=IRoleRepository)
    repo.find_by_id.side_effect = ROLES.get
    return repo

@pytest.fixture
def hierarchy_service(
    mock_user_repo: MagicMock, mock_membership_repo: MagicMock, mock_role_repo: MagicMock
) -> RoleHierarchyService:
    """실제 PermissionService 위에 모의 리포지토리를 연결한 RoleHierarchyService를 생성합니다."""
    permission_service = PermissionService(mock_user_repo, mock_membership_repo, mock_role_repo)
    return RoleHierarchyService(permission_service, mock_role_repo)

# ===================================================================
#  can_manage_member 테스트
# ===================================================================
class TestCanManageMember:
    def test_owner_can_manage_admin(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_manage_member(OWNER_ID, ADMIN_ID, PROJECT_ID) is True

    def test_admin_cannot_manage_owner(self, hierarchy_service: RoleHierarchyService):
        """관리 가능 여부는 순위에 따라 비대칭이어야 합니다."""
        assert hierarchy_service.can_manage_member(ADMIN_ID, OWNER_ID, PROJECT_ID) is False

    def test_admin_can_manage_member(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_manage_member(ADMIN_ID, MEMBER_ID, PROJECT_ID) is True

    def test_same_position_cannot_manage(self, hierarchy_service: RoleHierarchyService):
        """같은 순위(Admin -> Admin)는 관리할 수 없습니다."""
        assert hierarchy_service.can_manage_member(ADMIN_ID, ADMIN2_ID, PROJECT_ID) is False

    @pytest.mark.parametrize("user_id", [OWNER_ID, ADMIN_ID, MEMBER_ID, SYSADMIN_ID, OUTSIDER_ID])
    def test_nobody_can_manage_self(
        self, hierarchy_service: RoleHierarchyService, mock_user_repo: MagicMock, user_id: int
    ):
        """Owner나 시스템 관리자라도 자기 자신은 관리할 수 없습니다."""
        # === Act & Assert ===
        assert hierarchy_service.can_manage_member(user_id, user_id, PROJECT_ID) is False
        # 검증: 자기 자신 검사는 저장소 조회보다 먼저 이루어져야 함
        mock_user_repo.is_system_admin.assert_not_called()

    def test_system_admin_can_manage_anyone(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_manage_member(SYSADMIN_ID, OWNER_ID, PROJECT_ID) is True
        assert hierarchy_service.can_manage_member(SYSADMIN_ID, OUTSIDER_ID, PROJECT_ID) is True

    def test_member_without_manage_permission(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_manage_member(MEMBER_ID, OUTSIDER_ID, PROJECT_ID) is False

    def test_actor_without_membership(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_manage_member(OUTSIDER_ID, MEMBER_ID, PROJECT_ID) is False

    def test_target_without_membership(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_manage_member(OWNER_ID, OUTSIDER_ID, PROJECT_ID) is False

    def test_members_admin_alone_is_sufficient(
        self, hierarchy_service: RoleHierarchyService, mock_membership_repo: MagicMock
    ):
        """members.manage가 없어도 members.admin만 있으면 관리 자격이 있습니다."""
        # === Arrange ===
        custom_role = make_role(104, "Permissions Admin", 1, [Permission.MEMBERS_ADMIN])
        def lookup(user_id, project_id):
            if user_id == OUTSIDER_ID:
                member = models.ProjectMember(user_id=user_id, project_id=project_id, role_id=104)
                member.role = custom_role
                return member
            return find_membership(user_id, project_id)
        mock_membership_repo.find_membership.side_effect = lookup

        # === Act & Assert ===
        assert hierarchy_service.can_manage_member(OUTSIDER_ID, MEMBER_ID, PROJECT_ID) is True

# ===================================================================
#  can_assign_role 테스트
# ===================================================================
class TestCanAssignRole:
    def test_owner_can_assign_admin(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_assign_role(OWNER_ID, PROJECT_ID, 102) is True

    def test_owner_cannot_assign_owner(self, hierarchy_service: RoleHierarchyService):
        """소유권 이전은 이 검사로 허용되지 않습니다."""
        assert hierarchy_service.can_assign_role(OWNER_ID, PROJECT_ID, 101) is False

    def test_admin_cannot_assign_owner(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_assign_role(ADMIN_ID, PROJECT_ID, 101) is False

    def test_admin_cannot_assign_same_rank(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_assign_role(ADMIN_ID, PROJECT_ID, 102) is False

    def test_admin_can_assign_member(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_assign_role(ADMIN_ID, PROJECT_ID, 103) is True

    @pytest.mark.parametrize("role_id", [101, 102, 103])
    def test_member_cannot_assign_any_role(
        self, hierarchy_service: RoleHierarchyService, mock_role_repo: MagicMock, role_id: int
    ):
        # === Act & Assert ===
        assert hierarchy_service.can_assign_role(MEMBER_ID, PROJECT_ID, role_id) is False
        # 검증: 필수 권한이 없으면 역할을 조회하지 않음
        mock_role_repo.find_by_id.assert_not_called()

    def test_system_admin_can_assign_any_role(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_assign_role(SYSADMIN_ID, PROJECT_ID, 101) is True

    def test_unknown_role(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_assign_role(OWNER_ID, PROJECT_ID, 999) is False

    def test_role_from_other_project(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_assign_role(OWNER_ID, PROJECT_ID, 201) is False

    def test_actor_without_membership(self, hierarchy_service: RoleHierarchyService):
        assert hierarchy_service.can_assign_role(OUTSIDER_ID, PROJECT_ID, 103) is False
