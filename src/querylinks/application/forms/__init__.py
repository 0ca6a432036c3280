"""Application forms – filter form field descriptors."""
from querylinks.application.forms.filter_fields import (
    FilterEntryForm,
    FilterFieldEntry,
    FilterForm,
    HiddenInput,
    filter_fields,
    filter_label,
    hidden_inputs_for_filter,
    humanize,
    input_type_for,
    normalize_filter_fields,
)

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
