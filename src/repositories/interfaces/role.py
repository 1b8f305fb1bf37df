from abc import ABC, abstractmethod
from typing import List, Optional
from src.database import models

class IRoleRepository(ABC):
    @abstractmethod
    def create(self, role_model: models.Role) -> models.Role:
        """새로운 역할을 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def find_by_id(self, role_id: int) -> Optional[models.Role]:
        """고유 ID로 특정 역할을 조회합니다."""
        pass

    @abstractmethod
    def find_by_name(self, project_id: int, name: str) -> Optional[models.Role]:
        """프로젝트 안에서 이름으로 역할을 조회합니다. (대소문자 구분)"""
        pass

    @abstractmethod
    def find_default_by_position(self, project_id: int, position: int) -> Optional[models.Role]:
        """
        프로젝트의 기본 역할(is_default=True) 중 주어진 순위를 가진 역할을 조회합니다.
        기본 역할의 이름이 바뀌어도 순위로 찾을 수 있도록 하기 위함입니다.
        """
        pass

    @abstractmethod
    def list_roles(self, project_id: int) -> List[models.Role]:
        """프로젝트의 모든 역할을 position 오름차순(높은 권한 먼저)으로 조회합니다."""
        pass
