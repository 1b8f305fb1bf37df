from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from src.database import models
from src.repositories.interfaces import IMembershipRepository

class SqlalchemyMembershipRepository(IMembershipRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_membership(self, user_id: int, project_id: int) -> Optional[models.ProjectMember]:
        # 역할 조회를 위한 추가 쿼리를 피하기 위해 role을 함께 로드합니다.
        return self.db.query(models.ProjectMember).options(joinedload(models.ProjectMember.role)).filter(
            models.ProjectMember.user_id == user_id,
            models.ProjectMember.project_id == project_id
        ).first()

    def add_member(self, member_model: models.ProjectMember) -> models.ProjectMember:
        self.db.add(member_model)
        self.db.commit()
        self.db.refresh(member_model)
        return member_model

    def list_members(self, project_id: int) -> List[models.ProjectMember]:
        return self.db.query(models.ProjectMember).options(
            joinedload(models.ProjectMember.user), joinedload(models.ProjectMember.role)
        ).join(models.Role, models.ProjectMember.role_id == models.Role.id).filter(
            models.ProjectMember.project_id == project_id
        ).order_by(models.Role.position.asc(), models.ProjectMember.created_at.asc()).all()
