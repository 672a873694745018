from pydantic import BaseModel

class TaskStatusInput(BaseModel):
    status_name: str

class TaskStatusOut(BaseModel):
    id: int
    status_name: str

    class Config:
        from_attributes = True
