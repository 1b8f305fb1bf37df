import hashlib
import logging

from src import config
from .database import engine, SessionLocal, Base
from .models import User, Project, ProjectMember
from src.repositories.sqlalchemy.sqlalchemy_role_repository import SqlalchemyRoleRepository
from src.services.role_provisioning_service import RoleProvisioningService

logger = logging.getLogger(__name__)

def initialize_db(bind=engine, session_factory=SessionLocal):
    """
    DB와 테이블을 생성하고, 기본 데이터를 삽입합니다.

    최초 실행 시 시스템 관리자 계정, 기본 프로젝트와 그 기본 역할들,
    그리고 관리자를 Owner로 하는 멤버십을 생성합니다. 이미 사용자가 있으면 건너뜁니다.
    """
    logger.info("Initializing database...")

    # 모든 테이블을 생성합니다. (이미 존재하면 생성하지 않음)
    Base.metadata.create_all(bind=bind)

    db = session_factory()
    try:
        if db.query(User).first():
            logger.info("Seed data already present, skipping.")
            return

        password_hash = hashlib.sha256(config.SEED_ADMIN_PASSWORD.encode('utf-8')).hexdigest()
        admin_user = User(username=config.SEED_ADMIN_USERNAME, password_hash=password_hash, is_system_admin=True)
        default_project = Project(key=config.SEED_PROJECT_KEY, name=config.SEED_PROJECT_NAME)
        db.add(admin_user)
        db.add(default_project)

        # 변경사항을 커밋하여 각 객체의 id를 할당받습니다.
        db.commit()

        provisioner = RoleProvisioningService(SqlalchemyRoleRepository(db))
        owner_role_id = provisioner.get_owner_role_for_project(default_project.id)

        db.add(ProjectMember(user_id=admin_user.id, project_id=default_project.id, role_id=owner_role_id))
        db.commit()
        logger.info("Seeded admin user '%s' and project '%s'.", admin_user.username, default_project.key)

    except Exception:
        logger.exception("Database initialization failed, rolling back.")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == '__main__':
    config.configure_logging()
    initialize_db()
