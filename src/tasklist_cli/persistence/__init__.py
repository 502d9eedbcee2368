"""JSON file persistence helpers."""

from tasklist_cli.persistence._utils import atomic_write_json, write_json

__all__ = ["atomic_write_json", "write_json"]
