from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.orm import relationship
from ..database import Base

class User(Base):
    """
    시스템에 로그인하고 티켓, 댓글, 첨부파일을 작성할 수 있는 사용자를 나타냅니다.
    사용자는 여러 프로젝트에 각각 하나의 역할(Role)로 소속될 수 있습니다.
    is_system_admin은 프로젝트 멤버십과 무관한 전역 관리자 플래그입니다.
    """
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    is_system_admin = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)

    memberships = relationship("ProjectMember", back_populates="user", cascade="all, delete-orphan")
