from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from ..database import Base
from src.permissions.constants import parse_permissions

class Role(Base):
    """
    프로젝트 안에서 이름과 순위(position)를 가지는 권한 묶음입니다.
    position 값이 작을수록 더 높은 권한을 의미하며, 0은 기본 Owner 역할에 예약되어 있습니다.
    permissions 컬럼에는 권한 태그의 JSON 배열이 저장됩니다.
    """
    __tablename__ = "roles"
    __table_args__ = (UniqueConstraint("project_id", "name", name="uq_roles_project_name"),)

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    color = Column(String)
    description = Column(String)
    permissions = Column(Text, nullable=False, default="[]")
    is_default = Column(Boolean, nullable=False, default=False)
    position = Column(Integer, nullable=False)

    project = relationship("Project", back_populates="roles")

    @property
    def permission_list(self):
        return parse_permissions(self.permissions)
