"""Ideas, projects, life scores and the video pipeline."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Generic, List, Literal, Mapping, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from secondbrain.storage.collections import JsonCollectionStore

IdeaStatus = Literal["inbox", "developing", "shipped", "archived"]
ProjectStatus = Literal["idea", "active", "paused", "shipped", "archived"]
VideoStatus = Literal["idea", "scripted", "filming", "editing", "published"]


def _today() -> str:
    return date.today().isoformat()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _new_id() -> str:
    return str(uuid.uuid4())


class Entity(BaseModel):
    """Base for records stored with camelCase keys on disk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Idea(Entity):
    id: str
    content: str = ""
    created_at: str
    tags: List[str] = Field(default_factory=list)
    status: IdeaStatus = "inbox"


class Project(Entity):
    id: str
    name: str
    description: Optional[str] = None
    status: ProjectStatus = "idea"
    repo: Optional[str] = None
    created_at: str
    updated_at: str


class LifeScore(Entity):
    dimension: str
    score: int = Field(default=50, ge=0, le=100)
    emoji: str = ""
    notes: Optional[str] = None
    last_updated: str


class YouTubeVideo(Entity):
    id: str
    title: str
    status: VideoStatus = "idea"
    notes: Optional[str] = None
    published_url: Optional[str] = None
    created_at: str
    updated_at: str


EntityT = TypeVar("EntityT", bound=Entity)


class EntityStore(Generic[EntityT]):
    """Typed view over a :class:`JsonCollectionStore`."""

    model: Type[EntityT]
    filename: str
    key_field: str = "id"

    def __init__(self, data_dir: Path) -> None:
        self.collection = JsonCollectionStore(Path(data_dir) / self.filename)

    def seed(self) -> List[EntityT]:
        """Records written on first load when the file is missing."""
        return []

    def load(self) -> List[EntityT]:
        if not self.collection.exists():
            initial = self.seed()
            if initial:
                self.save(initial)
            return initial
        try:
            return [self.model.model_validate(item) for item in self.collection.load()]
        except ValidationError as exc:
            raise ValueError(f"Invalid record in {self.collection.path}: {exc}") from exc

    def save(self, items: Sequence[EntityT]) -> None:
        self.collection.save([item.to_json() for item in items])

    def replace(self, raw_items: Sequence[Mapping[str, Any]]) -> List[EntityT]:
        """Validate and store a complete collection sent by a client."""
        items = [self.model.model_validate(item) for item in raw_items]
        self.save(items)
        return items

    def _merge(self, item: EntityT, changes: Mapping[str, Any]) -> EntityT:
        merged = item.to_json()
        merged.update({key: value for key, value in changes.items() if key != self.key_field})
        return self.model.model_validate(merged)

    def update(self, key: str, changes: Mapping[str, Any]) -> Optional[EntityT]:
        """Apply camelCase ``changes`` to one record; ``None`` if it is missing."""
        items = self.load()
        for index, item in enumerate(items):
            if getattr(item, self.key_field) == key:
                items[index] = self._merge(item, self._stamp(changes))
                self.save(items)
                return items[index]
        return None

    def _stamp(self, changes: Mapping[str, Any]) -> Mapping[str, Any]:
        return changes


class IdeaStore(EntityStore[Idea]):
    model = Idea
    filename = "ideas.json"

    def create(self, content: str = "", *, status: IdeaStatus = "inbox", tags: Sequence[str] = ()) -> Idea:
        idea = Idea(id=_new_id(), content=content, status=status, tags=list(tags), created_at=_now())
        ideas = self.load()
        ideas.insert(0, idea)
        self.save(ideas)
        return idea

    def delete(self, key: str) -> None:
        self.save([idea for idea in self.load() if idea.id != key])


class ProjectStore(EntityStore[Project]):
    model = Project
    filename = "projects.json"

    def seed(self) -> List[Project]:
        day = _today()
        return [
            Project(
                id="1",
                name="YouTube Helper",
                description="Video analysis for titles, descriptions and tags",
                status="active",
                created_at=day,
                updated_at=day,
            ),
            Project(
                id="2",
                name="Second Brain",
                description="Living knowledge base for notes, projects and ideas",
                status="active",
                created_at=day,
                updated_at=day,
            ),
            Project(
                id="3",
                name="Game of Life",
                description="Gamifying personal evolution across 7 dimensions",
                status="idea",
                created_at=day,
                updated_at=day,
            ),
        ]

    def create(
        self,
        name: str | None = None,
        *,
        description: str | None = None,
        status: ProjectStatus = "idea",
        repo: str | None = None,
    ) -> Project:
        day = _today()
        project = Project(
            id=_new_id(),
            name=name or "New Project",
            description=description,
            status=status,
            repo=repo,
            created_at=day,
            updated_at=day,
        )
        projects = self.load()
        projects.append(project)
        self.save(projects)
        return project

    def _stamp(self, changes: Mapping[str, Any]) -> Mapping[str, Any]:
        return {**changes, "updatedAt": _today()}


LIFE_DIMENSIONS = (
    ("Mental", "🧠"),
    ("Physical", "💪"),
    ("Emotional", "❤️"),
    ("Social", "👥"),
    ("Financial", "💰"),
    ("Relational", "💕"),
    ("Spiritual", "✨"),
)


class LifeScoreStore(EntityStore[LifeScore]):
    model = LifeScore
    filename = "life-scores.json"
    key_field = "dimension"

    def seed(self) -> List[LifeScore]:
        day = _today()
        return [
            LifeScore(dimension=name, score=50, emoji=emoji, last_updated=day)
            for name, emoji in LIFE_DIMENSIONS
        ]

    def update_score(
        self, dimension: str, *, score: int | None = None, notes: str | None = None
    ) -> Optional[LifeScore]:
        """Set a dimension's score (clamped to 0..100) and/or notes."""
        changes: dict[str, Any] = {}
        if score is not None:
            changes["score"] = max(0, min(100, int(score)))
        if notes is not None:
            changes["notes"] = notes
        return self.update(dimension, changes)

    def _stamp(self, changes: Mapping[str, Any]) -> Mapping[str, Any]:
        return {**changes, "lastUpdated": _today()}


class VideoStore(EntityStore[YouTubeVideo]):
    model = YouTubeVideo
    filename = "youtube-pipeline.json"

    def create(
        self,
        title: str | None = None,
        *,
        status: VideoStatus = "idea",
        notes: str | None = None,
        published_url: str | None = None,
    ) -> YouTubeVideo:
        day = _today()
        video = YouTubeVideo(
            id=_new_id(),
            title=title or "New Video",
            status=status,
            notes=notes,
            published_url=published_url,
            created_at=day,
            updated_at=day,
        )
        videos = self.load()
        videos.append(video)
        self.save(videos)
        return video

    def _stamp(self, changes: Mapping[str, Any]) -> Mapping[str, Any]:
        return {**changes, "updatedAt": _today()}
