from typing import List, Optional
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IRoleRepository

class SqlalchemyRoleRepository(IRoleRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, role_model: models.Role) -> models.Role:
        self.db.add(role_model)
        self.db.commit()
        self.db.refresh(role_model)
        return role_model

    def find_by_id(self, role_id: int) -> Optional[models.Role]:
        return self.db.query(models.Role).filter(models.Role.id == role_id).first()

    def find_by_name(self, project_id: int, name: str) -> Optional[models.Role]:
        return self.db.query(models.Role).filter(
            models.Role.project_id == project_id,
            models.Role.name == name
        ).first()

    def find_default_by_position(self, project_id: int, position: int) -> Optional[models.Role]:
        return self.db.query(models.Role).filter(
            models.Role.project_id == project_id,
            models.Role.position == position,
            models.Role.is_default.is_(True)
        ).first()

    def list_roles(self, project_id: int) -> List[models.Role]:
        return self.db.query(models.Role).filter(models.Role.project_id == project_id).order_by(models.Role.position.asc()).all()
