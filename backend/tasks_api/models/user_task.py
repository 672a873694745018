from sqlalchemy import Column, Integer
from tasks_api.database.base import Base

class UserTask(Base):
    __tablename__ = "user_tasks"

    user_id = Column(Integer, primary_key=True, autoincrement=False)
    task_id = Column(Integer, primary_key=True, autoincrement=False)
    task_status_id = Column(Integer, nullable=False)
