"""Application query – query-string codec, path building and filter extraction."""
from querylinks.application.query.codec import to_query
from querylinks.application.query.encoding import decode_query, encode_query
from querylinks.application.query.filters import pop_filter
from querylinks.application.query.path import (
    CallbackPath,
    FunctionPath,
    PathSpec,
    QualifiedPath,
    UriPath,
    build_path,
    to_path_spec,
)

__all__ = [
    "CallbackPath",
    "FunctionPath",
    "PathSpec",
    "QualifiedPath",
    "UriPath",
    "build_path",
    "decode_query",
    "encode_query",
    "pop_filter",
    "to_path_spec",
    "to_query",
]
