# sshca_core/framework.py
"""
Request/response plumbing shared by backend paths.

A Path binds a pattern to a pydantic request schema and one callback per
operation. Callbacks receive the Request and the validated body and
return an optional Response; user errors come back as an error Response,
internal failures are raised.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel

from .storage import StorageProvider


class Operation(str, Enum):
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    LIST = "list"


@dataclass
class Request:
    operation: Operation
    path: str
    data: Dict[str, Any] = field(default_factory=dict)
    storage: Optional[StorageProvider] = None


@dataclass
class Response:
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    def is_error(self) -> bool:
        return self.error is not None


def error_response(message: str) -> Response:
    return Response(error=message)


OperationFunc = Callable[[Request, BaseModel], Optional[Response]]


@dataclass
class Path:
    pattern: str
    schema: Type[BaseModel]
    callbacks: Dict[Operation, OperationFunc] = field(default_factory=dict)
    help_synopsis: str = ""
    help_description: str = ""
