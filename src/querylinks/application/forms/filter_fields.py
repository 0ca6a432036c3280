"""Application forms – filter form field descriptors.

A :class:`FilterForm` wraps the :class:`Meta` of the last query. Its filter
entries are addressed as ``filters[<index>][<attr>]`` with ids
``<form id>_filters_<index>_<attr>``, so a submitted form decodes back into
the parameter shape :func:`to_query` produces.
"""
from __future__ import annotations

import dataclasses
import datetime
import decimal
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeAlias

from querylinks.application.query import to_query
from querylinks.application.state import Filter, FilterOp, Meta
from querylinks.config.defaults import SchemaRegistry, default_registry
from querylinks.kernel.errors import InvalidFilterFieldConfigError, InvalidFormError
from querylinks.observability.logging import get_logger

logger = get_logger(__name__)

FieldConfig: TypeAlias = tuple[str, dict[str, Any]]
TextSource: TypeAlias = Mapping[str, Any] | Callable[[str], Any] | None

# Position parameters are not carried over a filter change.
_RESET_ON_FILTER = ("filters", "page", "offset", "after", "before")


@dataclasses.dataclass(frozen=True)
class HiddenInput:
    id: str
    name: str
    value: Any


@dataclasses.dataclass(frozen=True)
class FilterForm:
    meta: Meta
    id: str | None = None

    @property
    def form_id(self) -> str:
        return self.id or "flop"


@dataclasses.dataclass(frozen=True)
class FilterEntryForm:
    """Form context of a single filter entry."""

    form: FilterForm
    index: int
    filter: Filter

    @property
    def name(self) -> str:
        return f"filters[{self.index}]"

    @property
    def id(self) -> str:
        return f"{self.form.form_id}_filters_{self.index}"

    def input_name(self, attr: str) -> str:
        return f"{self.name}[{attr}]"

    def input_id(self, attr: str) -> str:
        return f"{self.id}_{attr}"


@dataclasses.dataclass(frozen=True)
class FilterFieldEntry:
    form: FilterEntryForm
    field: str
    options: dict[str, Any]
    label: Any
    input_type: Any


def normalize_filter_fields(fields: Sequence[Any]) -> list[FieldConfig]:
    """Normalise ``"name"`` and ``("name", {...})`` items to ``(name, options)`` pairs."""
    normalized: list[FieldConfig] = []
    for item in fields:
        match item:
            case str():
                normalized.append((item, {}))
            case (str() as field, Mapping() as options):
                normalized.append((field, dict(options)))
            case _:
                raise InvalidFilterFieldConfigError(item)
    return normalized


def humanize(field: str) -> str:
    """``"owner_id"`` → ``"Owner"``, ``"first_name"`` → ``"First name"``."""
    if field.endswith("_id"):
        field = field[:-3]
    return field.replace("_", " ").capitalize()


def _require_filter_form(form: Any) -> FilterForm:
    if not isinstance(form, FilterForm):
        raise InvalidFormError("FilterForm", form)
    return form


def _require_entry_form(form: Any) -> FilterEntryForm:
    if not isinstance(form, FilterEntryForm):
        raise InvalidFormError("FilterEntryForm", form)
    return form


def _lookup(source: TextSource, field: str) -> Any:
    if source is None:
        return None
    if callable(source):
        return source(field)
    return source.get(field)


def filter_label(entry: FilterEntryForm, texts: TextSource = None) -> Any:
    """Label text for the entry's value input.

    *texts* maps fields to texts, or is a callable taking the field; falls
    back to the humanised field name.
    """
    entry = _require_entry_form(entry)
    text = _lookup(texts, entry.filter.field)
    return humanize(entry.filter.field) if text is None else text


def _inferred_type(value: Any) -> str:
    match value:
        case bool():
            return "checkbox"
        case int() | float() | decimal.Decimal():
            return "number"
        case datetime.datetime():
            return "datetime-local"
        case datetime.date():
            return "date"
        case datetime.time():
            return "time"
        case _:
            return "text"


def input_type_for(entry: FilterEntryForm, types: TextSource = None) -> Any:
    """Input type of the entry's value, from *types* or inferred from the current value."""
    entry = _require_entry_form(entry)
    input_type = _lookup(types, entry.filter.field)
    return _inferred_type(entry.filter.value) if input_type is None else input_type


def _hidden_values(form: FilterForm | FilterEntryForm) -> list[tuple[str, str, Any]]:
    match form:
        case FilterEntryForm():
            return [
                (form.input_id("field"), form.input_name("field"), form.filter.field),
                (form.input_id("op"), form.input_name("op"), form.filter.op.value),
            ]
        case FilterForm():
            params = to_query(form.meta.flop, {"for": form.meta.schema})
            return [
                (f"{form.form_id}_{key}", key, value)
                for key, value in params.items()
                if key not in _RESET_ON_FILTER
            ]
        case _:
            raise InvalidFormError("FilterForm or FilterEntryForm", form)


def hidden_inputs_for_filter(form: FilterForm | FilterEntryForm) -> list[HiddenInput]:
    """Hidden inputs carrying the non-editable part of *form*.

    For a filter entry these are its ``field`` and ``op``; for the whole form
    the sort and page size parameters. List values expand to one ``name[]``
    input each, ids suffixed ``_0``, ``_1``, ...
    """
    inputs: list[HiddenInput] = []
    for input_id, name, value in _hidden_values(form):
        if isinstance(value, (list, tuple)):
            inputs.extend(
                HiddenInput(f"{input_id}_{i}", f"{name}[]", item) for i, item in enumerate(value)
            )
        else:
            inputs.append(HiddenInput(input_id, name, value))
    return inputs


def _filterable(meta: Meta, field: str, registry: SchemaRegistry) -> bool:
    options = registry.get(meta.schema)
    return options is None or options.is_filterable(field)


def _static_filters(meta: Meta, fields: list[FieldConfig]) -> list[tuple[Filter, dict[str, Any]]]:
    existing = {}
    for entry in meta.flop.filters:
        existing.setdefault(entry.field, entry)
    pairs = []
    for field, options in fields:
        current = existing.get(field)
        if current is None:
            current = Filter(
                field,
                op=options.get("op", FilterOp.EQ),
                value=options.get("default"),
                default="default" in options,
            )
        pairs.append((current, options))
    return pairs


def filter_fields(
    form: FilterForm,
    fields: Sequence[Any],
    *,
    dynamic: bool = False,
    registry: SchemaRegistry | None = None,
) -> list[FilterFieldEntry]:
    """Build one entry per filter input of *form*.

    Static forms get an entry per configured field, reusing the current
    filter on that field or a fresh one built from the field's ``op`` and
    ``default`` options. Dynamic forms get an entry per filter present in
    the state, with options looked up by field. Fields the schema does not
    allow filtering on are skipped.
    """
    form = _require_filter_form(form)
    if registry is None:
        registry = default_registry
    configured = normalize_filter_fields(fields)

    if dynamic:
        options_by_field = dict(configured)
        pairs = [(f, options_by_field.get(f.field, {})) for f in form.meta.flop.filters]
    else:
        pairs = _static_filters(form.meta, configured)

    entries = []
    for current, options in pairs:
        if not _filterable(form.meta, current.field, registry):
            continue
        entry_form = FilterEntryForm(form, len(entries), current)
        entries.append(
            FilterFieldEntry(
                form=entry_form,
                field=current.field,
                options=options,
                label=filter_label(entry_form, {current.field: options.get("label")}),
                input_type=input_type_for(entry_form, {current.field: options.get("type")}),
            )
        )
    logger.debug("filter_fields_built", dynamic=dynamic, count=len(entries))
    return entries


__all__ = [
    "FilterEntryForm",
    "FilterFieldEntry",
    "FilterForm",
    "HiddenInput",
    "filter_fields",
    "filter_label",
    "hidden_inputs_for_filter",
    "humanize",
    "input_type_for",
    "normalize_filter_fields",
]
