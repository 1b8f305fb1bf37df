from typing import Optional
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IProjectRepository

class SqlalchemyProjectRepository(IProjectRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, project_model: models.Project) -> models.Project:
        self.db.add(project_model)
        self.db.commit()
        self.db.refresh(project_model)
        return project_model

    def find_by_key(self, key: str) -> Optional[models.Project]:
        return self.db.query(models.Project).filter(models.Project.key == key).first()
