from abc import ABC, abstractmethod
from typing import Optional
from src.database import models

class IProjectRepository(ABC):
    @abstractmethod
    def create(self, project_model: models.Project) -> models.Project:
        """새로운 프로젝트를 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def find_by_key(self, key: str) -> Optional[models.Project]:
        """프로젝트 키(예: 'DEMO')로 특정 프로젝트를 조회합니다."""
        pass
