from tasks_api.models.task_status import TaskStatus  # noqa: F401
from tasks_api.models.user_task import UserTask  # noqa: F401
