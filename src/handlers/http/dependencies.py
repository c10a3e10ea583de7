"""FastAPI dependency providers for the HTTP routes."""

from __future__ import annotations

from fastapi import Request

from src.state.runtime import RuntimeDeps


def get_runtime_deps(request: Request) -> RuntimeDeps:
    runtime_deps = getattr(request.app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    return runtime_deps


__all__ = ["get_runtime_deps"]
