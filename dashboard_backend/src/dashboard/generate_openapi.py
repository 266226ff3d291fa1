"""
Utility script to generate and write the OpenAPI schema for the FastAPI app.

This script imports the FastAPI application instance and serializes its OpenAPI
schema to the interfaces/openapi.json file so that API clients and documentation
tools can consume a stable spec without running the server.

Usage:
    python -m src.dashboard.generate_openapi

Notes:
- The script ensures the 'tasks' and 'dashboard' tags are present in the OpenAPI tags metadata.
- Output file path is relative to the container root: interfaces/openapi.json
"""
from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional

from .main import app, openapi_tags  # type: ignore


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """Append any app tag metadata (health, tasks, dashboard) the generated schema lacks."""
    declared: List[Dict[str, Any]] = [t for t in schema.get("tags") or [] if isinstance(t, dict)]
    known = {t.get("name") for t in declared}
    missing = [tag for tag in openapi_tags if tag["name"] not in known]
    if declared or missing:
        schema["tags"] = declared + missing


def _default_output_path() -> str:
    # <container_root>/interfaces/openapi.json, where this file is <container_root>/src/dashboard/...
    package_dir = os.path.dirname(os.path.abspath(__file__))
    container_root = os.path.dirname(os.path.dirname(package_dir))
    return os.path.join(container_root, "interfaces", "openapi.json")


# PUBLIC_INTERFACE
def write_openapi(out_path: Optional[str] = None) -> str:
    """
    Generate the OpenAPI schema from the FastAPI app and write it as pretty JSON,
    creating directories as needed.

    Returns:
        The path of the written file.
    """
    schema = app.openapi()
    _ensure_tags(schema)

    path = out_path or _default_output_path()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    return path


def main() -> None:
    print(f"Wrote OpenAPI schema to: {write_openapi()}")


if __name__ == "__main__":
    main()
