"""Per-invocation options for the functions clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .models import FunctionRegion, HttpMethod, InvokeBody


@dataclass(frozen=True)
class FunctionInvokeOptions:
    headers: Mapping[str, str] | None = None
    method: HttpMethod | str | None = None
    region: FunctionRegion | str | None = None
    body: InvokeBody | bytes | str | Mapping[str, Any] | None = None
