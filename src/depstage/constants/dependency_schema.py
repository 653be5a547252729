"""JSON Schema for dependency manifest files."""

from __future__ import annotations

from typing import Any

DEPENDENCY_MANIFEST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "required": ["dependencies"],
    "properties": {
        "dependencies": {
            "type": "array",
            "items": {
                "type": "object",
                "additionalProperties": False,
                "required": ["source"],
                "properties": {
                    "source": {"type": "string", "minLength": 1},
                    "destination": {"type": "string", "minLength": 1},
                    "module": {
                        "type": "object",
                        "additionalProperties": False,
                        "required": ["organization", "name", "revision"],
                        "properties": {
                            "organization": {"type": "string", "minLength": 1},
                            "name": {"type": "string", "minLength": 1},
                            "revision": {"type": "string", "minLength": 1},
                            "classifier": {"type": "string", "minLength": 1},
                        },
                    },
                },
                "not": {"required": ["destination", "module"]},
            },
        },
    },
}
