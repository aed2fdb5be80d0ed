#!/usr/bin/env python3
"""
Schema Registry

Ordered bindings of content collections to their root directory and
frontmatter schema, loaded from a declarative YAML registry file.

Registry format:
    collections:
      - name: blog
        root: ../posts                     # relative to the base directory
        schema: schemas/blog.schema.json   # relative to the registry file
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from jsonschema import validate, ValidationError

from collection_schema import CollectionSchema


SCRIPTS_DIR = Path(__file__).resolve().parent
SITE_DIR = SCRIPTS_DIR.parent
DEFAULT_REGISTRY = SCRIPTS_DIR / "collections.yaml"

# Meta-schema for the registry file itself
REGISTRY_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["collections"],
    "properties": {
        "collections": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "root", "schema"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "root": {"type": "string", "minLength": 1},
                    "schema": {"type": "string", "minLength": 1},
                },
                "additionalProperties": False,
            },
        },
    },
}


@dataclass
class CollectionBinding:
    """
    A content collection bound to its schema.

    Attributes:
        name: Collection name used in reports
        root: Directory holding the collection's markdown files
        schema: Schema applied to every file's frontmatter
        schema_path: File the schema was loaded from, if any
    """
    name: str
    root: Path
    schema: CollectionSchema
    schema_path: Optional[Path] = None

    def describe(self) -> Dict[str, str]:
        """Plain mapping of the resolved binding for debug output."""
        return {
            "name": self.name,
            "root": str(self.root),
            "schema": str(self.schema_path) if self.schema_path else "<inline>",
        }


def load_registry(registry_path: Path, base_dir: Optional[Path] = None) -> List[CollectionBinding]:
    """
    Load collection bindings from a YAML registry file.

    Args:
        registry_path: Path to the registry YAML file
        base_dir: Directory collection roots resolve against (default: site directory)

    Returns:
        Bindings in registry order

    Raises:
        ValueError: If the registry or any referenced schema cannot be loaded
    """
    registry_path = Path(registry_path)
    base_dir = Path(base_dir) if base_dir is not None else SITE_DIR

    try:
        registry = yaml.safe_load(registry_path.read_text(encoding='utf-8'))
    except OSError as e:
        raise ValueError(f"Cannot read registry {registry_path}: {e}")
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML in {registry_path}: {e}")

    try:
        validate(instance=registry, schema=REGISTRY_SCHEMA)
    except ValidationError as e:
        raise ValueError(f"Invalid registry {registry_path}: {e.message}")

    bindings = []
    for entry in registry["collections"]:
        schema_path = (registry_path.parent / entry["schema"]).resolve()
        bindings.append(CollectionBinding(
            name=entry["name"],
            root=(base_dir / entry["root"]).resolve(),
            schema=CollectionSchema.from_file(schema_path),
            schema_path=schema_path,
        ))

    return bindings


def default_registry(base_dir: Optional[Path] = None) -> List[CollectionBinding]:
    """Load the bindings shipped with the site (blog posts and code examples)."""
    return load_registry(DEFAULT_REGISTRY, base_dir)
