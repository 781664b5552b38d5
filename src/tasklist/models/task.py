"""Task record model."""

from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class Task(BaseModel):
    """A single task record.

    Every field is optional in a request body and falls back to the empty
    string, as does an explicit null. Keys match field names regardless of
    case, the last one winning. Non-string values are rejected; unknown keys
    are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    title: str = ""
    status: str = ""  # free text: 'pending', 'in progress', 'completed', ...

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key.lower() if isinstance(key, str) else key: value
                for key, value in data.items()
            }
        return data

    @field_validator("id", "title", "status", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "status": self.status
        }


# Records present when a store is created
SEED_TASKS: List[Task] = [
    Task(id="1", title="Learn Go", status="pending"),
    Task(id="2", title="Build a REST API", status="in progress"),
]
