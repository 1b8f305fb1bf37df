from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text, UniqueConstraint, func
from sqlalchemy.orm import relationship
from ..database import Base

class ProjectMember(Base):
    """
    사용자(User)와 프로젝트(Project) 사이의 멤버십을 나타냅니다.
    한 사용자는 한 프로젝트에 최대 하나의 멤버십만 가지며, 멤버십마다 정확히 하나의 역할을 가집니다.
    overrides에는 역할 권한에 추가로 부여되는 권한 태그의 JSON 배열이 저장됩니다. (추가만 가능)
    """
    __tablename__ = "project_members"
    __table_args__ = (UniqueConstraint("user_id", "project_id", name="uq_project_members_user_project"),)

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False)
    overrides = Column(Text)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="memberships")
    project = relationship("Project", back_populates="members")
    role = relationship("Role")
