"""Building blocks for protoc plugins: descriptor entities, field types, artifacts, build contexts, debuggers and comment wrapping."""

__version__ = "0.1.0"

__all__ = [
    "artifact",
    "comment",
    "context",
    "debug",
    "entity",
    "enums",
    "field",
    "field_type",
    "proto_file",
]