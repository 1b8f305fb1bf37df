from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..database import Base

class Project(Base):
    """
    보드, 스프린트, 티켓이 속하는 하나의 작업 공간을 나타냅니다.
    모든 역할(Role)과 멤버십(ProjectMember)은 이 Project 모델에 종속됩니다.
    """
    __tablename__ = "projects"
    id = Column(Integer, primary_key=True, index=True)
    key = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)

    roles = relationship("Role", back_populates="project", cascade="all, delete-orphan", order_by="Role.position")
    members = relationship("ProjectMember", back_populates="project", cascade="all, delete-orphan")
