from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IUserRepository

class SqlalchemyUserRepository(IUserRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, user_model: models.User) -> models.User:
        self.db.add(user_model)
        self.db.commit()
        self.db.refresh(user_model)
        return user_model

    def is_system_admin(self, user_id: int) -> bool:
        row = self.db.query(models.User.is_system_admin).filter(models.User.id == user_id).first()
        return bool(row and row[0])
