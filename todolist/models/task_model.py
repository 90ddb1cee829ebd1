from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from todolist.errors import ValidationError

TITLE_MAX_LENGTH = 100

# Fields a client may change through the update endpoint
UPDATABLE_FIELDS = ("title", "completed")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def isoformat(value: datetime) -> str:
    # pymongo hands back naive datetimes that are already UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Task:
    title: str
    completed: bool = False
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    id: Optional[str] = None

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "Task":
        return cls(
            id=str(doc["_id"]),
            title=doc["title"],
            completed=bool(doc.get("completed", False)),
            created_at=doc["createdAt"],
            updated_at=doc["updatedAt"],
        )

    def to_doc(self) -> Dict[str, Any]:
        """Document as inserted into the collection (the store assigns ``_id``)."""
        return {
            "title": self.title,
            "completed": self.completed,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }


def validate_title(value: Any) -> str:
    """Return the trimmed title or raise ValidationError."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Le titre est requis")
    title = value.strip()
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(f"Maximum {TITLE_MAX_LENGTH} caractères")
    return title


def validate_changes(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Keep the updatable fields of ``payload`` and validate them.

    Anything outside UPDATABLE_FIELDS (identifiers, timestamps, unknown
    keys) is dropped.
    """
    changes: Dict[str, Any] = {}
    if "title" in payload:
        changes["title"] = validate_title(payload["title"])
    if "completed" in payload:
        if not isinstance(payload["completed"], bool):
            raise ValidationError("Le champ completed doit être un booléen")
        changes["completed"] = payload["completed"]
    return changes
