# sshca_core/backend.py

from __future__ import annotations
from typing import Any, Dict, List, Optional
import threading

import pydantic

from .config import Settings, get_settings
from .framework import Operation, Path, Request, Response, error_response
from .logger import get_logger
from .path_config_ca import path_config_ca
from .schemas import parse_body, validation_message
from .storage import StorageProvider, load_storage_provider


class SSHBackend:
    """
    Dispatches requests to the registered paths.

    Storage is built from settings on first use unless one is passed in
    or attached to the request.
    """

    def __init__(self, settings: Optional[Settings] = None,
                 storage: Optional[StorageProvider] = None,
                 paths: Optional[List[Path]] = None):
        self.settings = settings or get_settings()
        self.log = get_logger(
            "sshca.backend",
            level=self.settings.SSHCA_LOG_LEVEL,
            to_file=self.settings.SSHCA_LOG_FILE,
        )
        self._storage = storage
        self._storage_lock = threading.Lock()
        self.paths = paths if paths is not None else [path_config_ca()]

    @property
    def storage(self) -> StorageProvider:
        if self._storage is None:
            with self._storage_lock:
                if self._storage is None:
                    self._storage = load_storage_provider(self.settings)
        return self._storage

    def route(self, path: str) -> Optional[Path]:
        path = path.strip("/")
        return next((p for p in self.paths if p.pattern == path), None)

    def handle_request(self, req: Request) -> Optional[Response]:
        path = self.route(req.path)
        if path is None:
            self.log.info(f"[BACKEND] unsupported path {req.path!r}")
            return error_response("unsupported path")

        try:
            operation = Operation(req.operation)
        except ValueError:
            operation = None
        callback = path.callbacks.get(operation)
        if callback is None:
            self.log.info(f"[BACKEND] unsupported operation {req.operation!r} on {path.pattern}")
            return error_response("unsupported operation")

        try:
            body = parse_body(path.schema, req.data)
        except pydantic.ValidationError as e:
            message = validation_message(e)
            self.log.info(f"[BACKEND] rejected input on {path.pattern}: {message}")
            return error_response(message)

        if req.storage is None:
            req.storage = self.storage
        return callback(req, body)

    def update(self, path: str, data: Optional[Dict[str, Any]] = None) -> Optional[Response]:
        return self.handle_request(Request(operation=Operation.UPDATE, path=path, data=data or {}))

    def help(self, path: str) -> Response:
        p = self.route(path)
        if p is None:
            return error_response("unsupported path")
        return Response(data={
            "synopsis": p.help_synopsis,
            "description": p.help_description,
            "fields": {name: f.description for name, f in p.schema.model_fields.items()},
        })
