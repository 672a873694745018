from pydantic import BaseModel, ConfigDict


class UserTaskInput(BaseModel):
    user_id: int
    task_id: int
    task_status_id: int


class UserTaskOut(UserTaskInput):
    model_config = ConfigDict(from_attributes=True)
