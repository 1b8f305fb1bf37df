from abc import ABC, abstractmethod
from src.database import models

class IUserRepository(ABC):
    @abstractmethod
    def create(self, user_model: models.User) -> models.User:
        """새로운 사용자를 데이터베이스에 생성합니다."""
        pass

    @abstractmethod
    def is_system_admin(self, user_id: int) -> bool:
        """
        사용자가 시스템 관리자인지 확인합니다.
        존재하지 않는 사용자는 False로 취급합니다.
        """
        pass
