from abc import ABC, abstractmethod
from typing import List, Optional
from src.database import models

class IMembershipRepository(ABC):
    @abstractmethod
    def find_membership(self, user_id: int, project_id: int) -> Optional[models.ProjectMember]:
        """
        사용자의 프로젝트 멤버십을 연결된 역할(Role)과 함께 조회합니다.

        Args:
            user_id: 조회할 사용자의 ID.
            project_id: 조회할 프로젝트의 ID.

        Returns:
            멤버십이 있으면 role이 로드된 ProjectMember, 없으면 None.
        """
        pass

    @abstractmethod
    def add_member(self, member_model: models.ProjectMember) -> models.ProjectMember:
        """새로운 멤버십을 생성합니다."""
        pass

    @abstractmethod
    def list_members(self, project_id: int) -> List[models.ProjectMember]:
        """프로젝트의 모든 멤버십을 역할 순위 순서대로 조회합니다."""
        pass
