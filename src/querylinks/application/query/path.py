"""Application query – path building.

A path specification is one of four variants:

* :class:`UriPath` – a literal URI; parameters are merged into its query.
* :class:`FunctionPath` – a callable plus preset positional arguments.
* :class:`QualifiedPath` – like ``FunctionPath``, with the callable named by
  module and attribute.
* :class:`CallbackPath` – a one-argument callable receiving the parameters.

Raw forms are accepted too, see :func:`to_path_spec`.
"""
from __future__ import annotations

import dataclasses
import importlib
import inspect
from types import ModuleType
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeAlias
from urllib.parse import urlsplit, urlunsplit

from querylinks.application.query.codec import to_query
from querylinks.application.query.encoding import decode_query, encode_query
from querylinks.application.state import Flop, Meta
from querylinks.config.defaults import SchemaRegistry
from querylinks.config.settings import QueryLinksSettings
from querylinks.kernel.errors import InvalidPathSpecError, PathArityError, UsageError
from querylinks.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class UriPath:
    uri: str


@dataclasses.dataclass(frozen=True)
class FunctionPath:
    func: Callable[..., Any]
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


@dataclasses.dataclass(frozen=True)
class QualifiedPath:
    module: str | ModuleType
    function: str
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def from_reference(cls, reference: str, args: Sequence[Any] = ()) -> QualifiedPath:
        """Parse ``"package.module:function"``."""
        module, sep, function = reference.partition(":")
        if not sep or not module or not function:
            raise InvalidPathSpecError(reference, "expected 'package.module:function'")
        return cls(module, function, tuple(args))

    def resolve(self) -> Callable[..., Any]:
        try:
            module = (
                importlib.import_module(self.module) if isinstance(self.module, str) else self.module
            )
            func = getattr(module, self.function)
        except (ImportError, AttributeError) as exc:
            raise InvalidPathSpecError(self, str(exc), cause=exc) from exc
        if not callable(func):
            raise InvalidPathSpecError(self, f"{self.function} is not callable")
        return func


@dataclasses.dataclass(frozen=True)
class CallbackPath:
    func: Callable[[dict[str, Any]], Any]


PathSpec: TypeAlias = UriPath | FunctionPath | QualifiedPath | CallbackPath


def to_path_spec(path: Any) -> PathSpec:
    """Coerce a raw path form into a :data:`PathSpec`.

    * ``str`` → :class:`UriPath`
    * ``(module, "function", [args])`` → :class:`QualifiedPath`
    * ``(callable, [args])`` → :class:`FunctionPath`
    * any other callable → :class:`CallbackPath`
    """
    match path:
        case UriPath() | FunctionPath() | QualifiedPath() | CallbackPath():
            return path
        case str():
            return UriPath(path)
        case (str() | ModuleType() as module, str() as function, list() | tuple() as args):
            return QualifiedPath(module, function, tuple(args))
        case (func, list() | tuple() as args) if callable(func):
            return FunctionPath(func, tuple(args))
        case _ if callable(path):
            return CallbackPath(path)
        case _:
            raise InvalidPathSpecError(path)


def _params_for(
    source: Any,
    opts: Mapping[str, Any] | None,
    registry: SchemaRegistry | None,
    settings: QueryLinksSettings | None,
) -> dict[str, Any]:
    match source:
        case Meta():
            merged = {"for": source.schema, **(opts or {})}
            return to_query(source.flop, merged, registry=registry, settings=settings)
        case Flop():
            return to_query(source, opts, registry=registry, settings=settings)
        case Mapping():
            return dict(source)
        case list() | tuple():
            return dict(source)
        case _:
            raise UsageError(f"cannot build query parameters from {type(source).__name__}")


def _final_args(args: Sequence[Any], params: dict[str, Any]) -> list[Any]:
    if args and isinstance(args[-1], Mapping):
        query = {k: v for k, v in args[-1].items() if k not in params}
        query.update(params)
        return [*args[:-1], query]
    return [*args, params]


def _apply(func: Callable[..., Any], args: list[Any]) -> Any:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        signature = None
    if signature is not None:
        try:
            signature.bind(*args)
        except TypeError as exc:
            raise PathArityError(func, len(args), cause=exc) from exc
    return func(*args)


def _build_uri(uri: str, params: dict[str, Any]) -> str:
    parts = urlsplit(uri)
    query = decode_query(parts.query)
    query.update({str(k): v for k, v in params.items()})
    query = dict(sorted(query.items()))
    return urlunsplit(parts._replace(query=encode_query(query)))


def build_path(
    path: Any,
    source: Meta | Flop | Mapping[str, Any],
    opts: Mapping[str, Any] | None = None,
    *,
    registry: SchemaRegistry | None = None,
    settings: QueryLinksSettings | None = None,
) -> Any:
    """Build a destination for *path* carrying the parameters of *source*.

    *source* is a :class:`Meta` (its schema becomes the ``for`` option), a
    :class:`Flop` (encoded with :func:`to_query` and *opts*) or a ready
    parameter mapping, e.g. one returned by :func:`pop_filter`.

    >>> build_path("/pets", Flop(page=2, page_size=10))
    '/pets?page=2&page_size=10'
    >>> build_path("/pets?species=dogs", Flop(page=2, page_size=10))
    '/pets?page=2&page_size=10&species=dogs'
    >>> build_path(lambda params: f"/pets/page/{params['page']}", Flop(page=2))
    '/pets/page/2'

    Function paths receive the parameters as their last argument, merged
    into it when the last preset argument already is a mapping:

    >>> def pet_url(section, query):
    ...     return f"/{section}?{encode_query(query)}"
    >>> build_path((pet_url, ["pets", {"user_id": 123}]), Flop(order_by=["name"]))
    '/pets?user_id=123&order_by[]=name'
    """
    spec = to_path_spec(path)
    params = _params_for(source, opts, registry, settings)

    match spec:
        case UriPath(uri=uri):
            result = _build_uri(uri, params)
        case FunctionPath(func=func, args=args):
            result = _apply(func, _final_args(args, params))
        case QualifiedPath(args=args):
            result = _apply(spec.resolve(), _final_args(args, params))
        case CallbackPath(func=func):
            result = _apply(func, [params])

    logger.debug("path_built", kind=type(spec).__name__, params=list(params))
    return result


__all__ = [
    "CallbackPath",
    "FunctionPath",
    "PathSpec",
    "QualifiedPath",
    "UriPath",
    "build_path",
    "to_path_spec",
]
