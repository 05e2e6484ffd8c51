"""Cat profile model."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


def generate_id() -> str:
    """Generate an opaque unique cat identifier."""
    return uuid4().hex


@dataclass
class Cat:
    """A cat whose health is being tracked."""

    name: str
    photo: str | None = None  # path or URL, never interpreted
    id: str = field(default_factory=generate_id)
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        self.name = self.name.strip()
        if not self.name:
            raise ValueError("Cat name cannot be empty")

    def rename(self, name: str) -> None:
        """Change the display name."""
        name = name.strip()
        if not name:
            raise ValueError("Cat name cannot be empty")
        self.name = name

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "photo": self.photo,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Cat":
        """Create from dictionary."""
        created_at = data.get("created_at")
        return cls(
            id=data["id"],
            name=data["name"],
            photo=data.get("photo"),
            created_at=(
                datetime.fromisoformat(created_at) if created_at else datetime.now()
            ),
        )
