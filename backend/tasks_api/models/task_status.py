from sqlalchemy import Column, Integer, String

from tasks_api.database.base import Base


class TaskStatus(Base):
    __tablename__ = "task_statuses"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    status_name = Column(String, nullable=False)
