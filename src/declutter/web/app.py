"""FastAPI application backing the Declutter desktop UI."""

from __future__ import annotations

import asyncio
import logging
from typing import List

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from declutter import __version__, api
from declutter.config import AppConfig, DeletePolicy
from declutter.errors import DeclutterError
from declutter.models import DirectoryNode, FileEntry, FileMetadata, MutationResult
from declutter.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="Declutter", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(frontend_router)
app.state.config = AppConfig()
app.state.folder_picker = None

STATUS_BY_KIND = {
    "NotFound": 404,
    "NotADirectory": 400,
}


class RenamePayload(BaseModel):
    old_path: str
    new_path: str


class UndoRenamePayload(BaseModel):
    current_path: str
    original_path: str


class DeletePayload(BaseModel):
    paths: List[str]
    policy: DeletePolicy | None = None


class RevealPayload(BaseModel):
    path: str


def _config() -> AppConfig:
    return app.state.config


@app.exception_handler(DeclutterError)
async def declutter_error_handler(request: Request, exc: DeclutterError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, 500)
    if status_code == 500:
        LOGGER.error("%s on %s: %s", exc.kind, request.url.path, exc.detail)
    return JSONResponse(status_code=status_code, content={"detail": exc.detail, "kind": exc.kind})


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc), "kind": "InvalidArgument"})


@app.post("/select-folder")
async def select_folder() -> dict[str, str | None]:
    picker = app.state.folder_picker
    if picker is None:
        raise HTTPException(status_code=503, detail="Folder picker unavailable")
    return {"path": await api.select_folder(picker)}


@app.get("/files")
async def list_files(
    folder_path: str, include_folders: bool | None = None
) -> dict[str, List[FileEntry]]:
    if include_folders is None:
        include_folders = _config().include_folders
    files = await asyncio.to_thread(api.list_files, folder_path, include_folders)
    return {"files": files}


@app.get("/tree")
async def list_directory_tree(folder_path: str, max_depth: int | None = None) -> DirectoryNode:
    if max_depth is None:
        max_depth = _config().max_depth
    return await asyncio.to_thread(api.list_directory_tree, folder_path, max_depth)


@app.get("/count")
async def get_folder_contents_count(folder_path: str) -> dict[str, int]:
    counts = await asyncio.to_thread(api.get_folder_contents_count, folder_path)
    return {"files": counts.file_count, "folders": counts.folder_count}


@app.get("/metadata")
async def get_file_metadata(file_path: str) -> FileMetadata:
    return await asyncio.to_thread(api.get_file_metadata, file_path)


@app.post("/rename")
async def rename_file(payload: RenamePayload) -> dict[str, str]:
    api.rename_file(payload.old_path, payload.new_path)
    return {"status": "ok"}


@app.post("/rename/undo")
async def undo_rename(payload: UndoRenamePayload) -> dict[str, str]:
    api.undo_rename(payload.current_path, payload.original_path)
    return {"status": "ok"}


@app.get("/preview")
async def read_text_preview(file_path: str, max_chars: int | None = None) -> dict[str, str]:
    if max_chars is None:
        max_chars = _config().preview_chars
    text = await asyncio.to_thread(api.read_text_preview, file_path, max_chars)
    return {"text": text}


@app.post("/delete")
async def delete_files(payload: DeletePayload) -> MutationResult:
    policy = payload.policy or _config().delete_policy
    LOGGER.info("Deleting %d paths (%s)", len(payload.paths), policy.value)
    return await asyncio.to_thread(api.delete_files, payload.paths, policy)


@app.post("/reveal")
async def reveal_in_explorer(payload: RevealPayload) -> dict[str, str]:
    api.reveal_in_explorer(payload.path)
    return {"status": "ok"}
