"""FastAPI application backing the Second Brain dashboard."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import asdict
from pathlib import Path
from typing import Any, AsyncIterator, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from secondbrain import __version__
from secondbrain.activity import recent_activity
from secondbrain.config import AppConfig
from secondbrain.index.library import DocumentLibrary
from secondbrain.index.search import Searcher
from secondbrain.models import Document
from secondbrain.storage.entities import (
    IdeaStatus,
    IdeaStore,
    LifeScoreStore,
    ProjectStatus,
    ProjectStore,
    VideoStatus,
    VideoStore,
)

LOGGER = logging.getLogger(__name__)

router = APIRouter()


class IdeaPayload(BaseModel):
    content: str = ""
    status: IdeaStatus = "inbox"
    tags: List[str] = Field(default_factory=list)


class ProjectPayload(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    status: ProjectStatus = "idea"
    repo: Optional[str] = None


class VideoPayload(BaseModel):
    title: Optional[str] = None
    status: VideoStatus = "idea"
    notes: Optional[str] = None
    publishedUrl: Optional[str] = None


class LifeScorePatch(BaseModel):
    dimension: str
    score: Optional[int] = None
    notes: Optional[str] = None


class DeletePayload(BaseModel):
    id: str


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_library(config: AppConfig = Depends(get_config)) -> DocumentLibrary:
    return DocumentLibrary(config.resolve_docs_dir(Path.cwd()))


def get_searcher(
    config: AppConfig = Depends(get_config),
    library: DocumentLibrary = Depends(get_library),
) -> Searcher:
    return Searcher(
        library,
        limit=config.search_limit,
        excerpt_before=config.excerpt_before,
        excerpt_after=config.excerpt_after,
    )


def _data_dir(config: AppConfig) -> Path:
    return config.resolve_data_dir(Path.cwd())


def get_idea_store(config: AppConfig = Depends(get_config)) -> IdeaStore:
    return IdeaStore(_data_dir(config))


def get_project_store(config: AppConfig = Depends(get_config)) -> ProjectStore:
    return ProjectStore(_data_dir(config))


def get_life_score_store(config: AppConfig = Depends(get_config)) -> LifeScoreStore:
    return LifeScoreStore(_data_dir(config))


def get_video_store(config: AppConfig = Depends(get_config)) -> VideoStore:
    return VideoStore(_data_dir(config))


def _document_summary(doc: Document) -> Dict[str, Any]:
    return {
        "slug": doc.slug,
        "path": str(doc.path),
        "folder": doc.folder,
        "title": doc.title,
        "frontmatter": doc.frontmatter,
        "modifiedAt": doc.modified_at.isoformat(),
        "wordCount": doc.word_count,
    }


def _document_detail(doc: Document) -> Dict[str, Any]:
    return {**_document_summary(doc), "content": doc.content}


def _split_patch(payload: Dict[str, Any], key: str = "id") -> tuple[str, Dict[str, Any]]:
    identifier = payload.get(key)
    if not isinstance(identifier, str) or not identifier:
        raise HTTPException(status_code=400, detail=f"Missing '{key}'")
    return identifier, {k: v for k, v in payload.items() if k != key}


# Documents and search


@router.get("/search")
def search_documents(
    q: Optional[str] = None, searcher: Searcher = Depends(get_searcher)
) -> dict[str, List[Dict[str, str]]]:
    if not q or not q.strip():
        return {"results": []}
    return {"results": [asdict(result) for result in searcher.search(q)]}


@router.get("/documents")
def list_documents(library: DocumentLibrary = Depends(get_library)) -> dict[str, Any]:
    """List every document in the corpus, newest first."""
    documents = library.list_all()
    stats = {
        "document_count": len(documents),
        "word_count": sum(doc.word_count for doc in documents),
    }
    return {"documents": [_document_summary(doc) for doc in documents], "stats": stats}


@router.get("/tree")
def folder_tree(library: DocumentLibrary = Depends(get_library)) -> dict[str, Any]:
    folders = [
        {
            "name": tree.name,
            "path": tree.path,
            "documents": [
                {"slug": ref.slug, "title": ref.title, "path": str(ref.path)}
                for ref in tree.documents
            ],
        }
        for tree in library.folder_tree()
    ]
    return {"folders": folders}


@router.get("/documents/{slug:path}")
def get_document(slug: str, library: DocumentLibrary = Depends(get_library)) -> dict[str, Any]:
    document = library.by_slug(slug)
    if document is None:
        raise HTTPException(status_code=404, detail=f"Document not found: {slug}")
    return _document_detail(document)


@router.get("/activity")
def activity(config: AppConfig = Depends(get_config)) -> dict[str, Any]:
    items = recent_activity([config.resolve_docs_dir(Path.cwd())])
    return {
        "activity": [
            {
                "id": item.id,
                "timestamp": item.timestamp.isoformat(),
                "type": item.type,
                "action": item.action,
                "details": item.details,
                "icon": item.icon,
            }
            for item in items
        ]
    }


# Ideas


@router.get("/ideas")
def list_ideas(store: IdeaStore = Depends(get_idea_store)) -> List[Dict[str, Any]]:
    return [idea.to_json() for idea in store.load()]


@router.put("/ideas")
def replace_ideas(
    ideas: List[Dict[str, Any]] = Body(...), store: IdeaStore = Depends(get_idea_store)
) -> dict[str, bool]:
    try:
        store.replace(ideas)
    except ValueError as exc:
        LOGGER.error("Unable to save ideas: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to save ideas") from exc
    return {"success": True}


@router.post("/ideas")
def create_idea(payload: IdeaPayload, store: IdeaStore = Depends(get_idea_store)) -> Dict[str, Any]:
    try:
        idea = store.create(payload.content, status=payload.status, tags=payload.tags)
    except ValueError as exc:
        LOGGER.error("Unable to create idea: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to create idea") from exc
    return idea.to_json()


@router.patch("/ideas")
def update_idea(
    payload: Dict[str, Any] = Body(...), store: IdeaStore = Depends(get_idea_store)
) -> Dict[str, Any]:
    idea_id, changes = _split_patch(payload)
    try:
        idea = store.update(idea_id, changes)
    except ValueError as exc:
        LOGGER.error("Unable to update idea %s: %s", idea_id, exc)
        raise HTTPException(status_code=500, detail="Failed to update idea") from exc
    if idea is None:
        raise HTTPException(status_code=404, detail="Idea not found")
    return idea.to_json()


@router.delete("/ideas")
def delete_idea(payload: DeletePayload, store: IdeaStore = Depends(get_idea_store)) -> dict[str, bool]:
    try:
        store.delete(payload.id)
    except ValueError as exc:
        LOGGER.error("Unable to delete idea %s: %s", payload.id, exc)
        raise HTTPException(status_code=500, detail="Failed to delete idea") from exc
    return {"success": True}


# Projects


@router.get("/projects")
def list_projects(store: ProjectStore = Depends(get_project_store)) -> List[Dict[str, Any]]:
    return [project.to_json() for project in store.load()]


@router.put("/projects")
def replace_projects(
    projects: List[Dict[str, Any]] = Body(...), store: ProjectStore = Depends(get_project_store)
) -> dict[str, bool]:
    try:
        store.replace(projects)
    except ValueError as exc:
        LOGGER.error("Unable to save projects: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to save projects") from exc
    return {"success": True}


@router.post("/projects")
def create_project(
    payload: ProjectPayload, store: ProjectStore = Depends(get_project_store)
) -> Dict[str, Any]:
    try:
        project = store.create(
            payload.name,
            description=payload.description,
            status=payload.status,
            repo=payload.repo,
        )
    except ValueError as exc:
        LOGGER.error("Unable to create project: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to create project") from exc
    return project.to_json()


@router.patch("/projects")
def update_project(
    payload: Dict[str, Any] = Body(...), store: ProjectStore = Depends(get_project_store)
) -> Dict[str, Any]:
    project_id, changes = _split_patch(payload)
    try:
        project = store.update(project_id, changes)
    except ValueError as exc:
        LOGGER.error("Unable to update project %s: %s", project_id, exc)
        raise HTTPException(status_code=500, detail="Failed to update project") from exc
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return project.to_json()


# Life scores


@router.get("/life-scores")
def list_life_scores(store: LifeScoreStore = Depends(get_life_score_store)) -> List[Dict[str, Any]]:
    return [score.to_json() for score in store.load()]


@router.put("/life-scores")
def replace_life_scores(
    scores: List[Dict[str, Any]] = Body(...), store: LifeScoreStore = Depends(get_life_score_store)
) -> dict[str, bool]:
    try:
        store.replace(scores)
    except ValueError as exc:
        LOGGER.error("Unable to save life scores: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to save scores") from exc
    return {"success": True}


@router.patch("/life-scores")
def update_life_score(
    payload: LifeScorePatch, store: LifeScoreStore = Depends(get_life_score_store)
) -> Dict[str, Any]:
    try:
        score = store.update_score(payload.dimension, score=payload.score, notes=payload.notes)
    except ValueError as exc:
        LOGGER.error("Unable to update %s: %s", payload.dimension, exc)
        raise HTTPException(status_code=500, detail="Failed to update score") from exc
    if score is None:
        raise HTTPException(status_code=404, detail="Dimension not found")
    return score.to_json()


# Video pipeline


@router.get("/youtube")
def list_videos(store: VideoStore = Depends(get_video_store)) -> List[Dict[str, Any]]:
    return [video.to_json() for video in store.load()]


@router.put("/youtube")
def replace_videos(
    videos: List[Dict[str, Any]] = Body(...), store: VideoStore = Depends(get_video_store)
) -> dict[str, bool]:
    try:
        store.replace(videos)
    except ValueError as exc:
        LOGGER.error("Unable to save videos: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to save videos") from exc
    return {"success": True}


@router.post("/youtube")
def create_video(payload: VideoPayload, store: VideoStore = Depends(get_video_store)) -> Dict[str, Any]:
    try:
        video = store.create(
            payload.title,
            status=payload.status,
            notes=payload.notes,
            published_url=payload.publishedUrl,
        )
    except ValueError as exc:
        LOGGER.error("Unable to create video: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to create video") from exc
    return video.to_json()


@router.patch("/youtube")
def update_video(
    payload: Dict[str, Any] = Body(...), store: VideoStore = Depends(get_video_store)
) -> Dict[str, Any]:
    video_id, changes = _split_patch(payload)
    try:
        video = store.update(video_id, changes)
    except ValueError as exc:
        LOGGER.error("Unable to update video %s: %s", video_id, exc)
        raise HTTPException(status_code=500, detail="Failed to update video") from exc
    if video is None:
        raise HTTPException(status_code=404, detail="Video not found")
    return video.to_json()


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Build the application around an injected configuration."""
    config = config or AppConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
        data_dir = config.ensure_data_dir(Path.cwd())
        LOGGER.info("Serving documents from %s (data: %s)", config.resolve_docs_dir(Path.cwd()), data_dir)
        yield

    application = FastAPI(title="Second Brain", version=__version__, lifespan=lifespan)
    application.state.config = config
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(router)
    return application


app = create_app()
