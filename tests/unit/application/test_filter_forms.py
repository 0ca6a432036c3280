"""Unit tests for filter form field descriptors."""

from __future__ import annotations

import datetime

import pytest

from querylinks.application.forms import (
    FilterEntryForm,
    FilterForm,
    HiddenInput,
    filter_fields,
    filter_label,
    hidden_inputs_for_filter,
    humanize,
    input_type_for,
    normalize_filter_fields,
)
from querylinks.application.state import Filter, FilterOp, Flop, Meta
from querylinks.config.defaults import SchemaRegistry
from querylinks.kernel.errors import InvalidFilterFieldConfigError, InvalidFormError


@pytest.fixture
def meta() -> Meta:
    flop = Flop(
        page=2,
        page_size=10,
        order_by=["name"],
        filters=[Filter("name", "=~", "Rex"), Filter("age", ">=", 3)],
    )
    return Meta(flop=flop, schema="pets")


@pytest.fixture
def form(meta: Meta) -> FilterForm:
    return FilterForm(meta)


# ---------------------------------------------------------------------------
# normalize_filter_fields / humanize
# ---------------------------------------------------------------------------


class TestNormalizeFilterFields:
    def test_names_and_pairs(self) -> None:
        assert normalize_filter_fields(["a", ("b", {"label": "B"})]) == [("a", {}), ("b", {"label": "B"})]

    @pytest.mark.parametrize("item", [1, ("b", "label"), ("b", {}, {}), {"b": {}}, None])
    def test_invalid(self, item) -> None:
        with pytest.raises(InvalidFilterFieldConfigError):
            normalize_filter_fields([item])


class TestHumanize:
    @pytest.mark.parametrize(
        ("field", "label"),
        [("name", "Name"), ("first_name", "First name"), ("owner_id", "Owner")],
    )
    def test_humanize(self, field: str, label: str) -> None:
        assert humanize(field) == label


# ---------------------------------------------------------------------------
# filter_fields
# ---------------------------------------------------------------------------


class TestFilterFields:
    def test_static_fields(self, form: FilterForm) -> None:
        entries = filter_fields(
            form,
            ["email", ("name", {"label": "Pet name", "type": "search"}), "age"],
        )
        assert [e.field for e in entries] == ["email", "name", "age"]
        assert [e.label for e in entries] == ["Email", "Pet name", "Age"]
        assert [e.input_type for e in entries] == ["text", "search", "number"]
        assert entries[0].form.filter == Filter("email")
        assert entries[1].form.filter == Filter("name", "=~", "Rex")

    def test_static_default_filter(self, form: FilterForm) -> None:
        entry = filter_fields(form, [("species", {"op": "!=", "default": "cat"})])[0]
        assert entry.form.filter.op is FilterOp.NOT_EQ
        assert entry.form.filter.value == "cat"
        assert entry.form.filter.default

    def test_input_names_and_ids(self, form: FilterForm) -> None:
        entry = filter_fields(form, ["email", "name"])[1]
        assert entry.form.index == 1
        assert entry.form.input_name("value") == "filters[1][value]"
        assert entry.form.input_id("value") == "flop_filters_1_value"

    def test_custom_form_id(self, meta: Meta) -> None:
        entry = filter_fields(FilterForm(meta, id="pet-filter"), ["name"])[0]
        assert entry.form.input_id("value") == "pet-filter_filters_0_value"

    def test_dynamic_fields(self, form: FilterForm) -> None:
        entries = filter_fields(form, [("age", {"label": "Years"})], dynamic=True)
        assert [e.field for e in entries] == ["name", "age"]
        assert [e.label for e in entries] == ["Name", "Years"]
        assert entries[0].options == {}

    def test_non_filterable_skipped(self, form: FilterForm) -> None:
        registry = SchemaRegistry()
        registry.register("pets", filterable=["age"])
        entries = filter_fields(form, ["name", "age"], registry=registry)
        assert [(e.field, e.form.index) for e in entries] == [("age", 0)]

    def test_requires_filter_form(self, meta: Meta) -> None:
        with pytest.raises(InvalidFormError):
            filter_fields(meta, ["name"])

    def test_invalid_config(self, form: FilterForm) -> None:
        with pytest.raises(InvalidFilterFieldConfigError):
            filter_fields(form, [("name", ["label"])])


# ---------------------------------------------------------------------------
# filter_label / input_type_for
# ---------------------------------------------------------------------------


class TestFilterLabel:
    def test_mapping_callable_and_fallback(self, form: FilterForm) -> None:
        entry = FilterEntryForm(form, 0, Filter("owner_id"))
        assert filter_label(entry, {"owner_id": "Owner ID"}) == "Owner ID"
        assert filter_label(entry, lambda field: field.upper()) == "OWNER_ID"
        assert filter_label(entry, {"other": "x"}) == "Owner"
        assert filter_label(entry) == "Owner"

    def test_requires_entry_form(self, form: FilterForm) -> None:
        with pytest.raises(InvalidFormError):
            filter_label(form)


class TestInputTypeFor:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "text"),
            ("x", "text"),
            (True, "checkbox"),
            (3, "number"),
            (2.5, "number"),
            (datetime.date(2024, 1, 1), "date"),
            (datetime.datetime(2024, 1, 1, 12), "datetime-local"),
            (datetime.time(12), "time"),
        ],
    )
    def test_inferred(self, form: FilterForm, value, expected: str) -> None:
        entry = FilterEntryForm(form, 0, Filter("f", value=value))
        assert input_type_for(entry) == expected

    def test_explicit_types(self, form: FilterForm) -> None:
        entry = FilterEntryForm(form, 0, Filter("email"))
        assert input_type_for(entry, {"email": "email"}) == "email"
        assert input_type_for(entry, lambda field: ("select", ["a", "b"])) == ("select", ["a", "b"])

    def test_requires_entry_form(self) -> None:
        with pytest.raises(InvalidFormError):
            input_type_for(Filter("email"))


# ---------------------------------------------------------------------------
# hidden_inputs_for_filter
# ---------------------------------------------------------------------------


class TestHiddenInputs:
    def test_entry_field_and_op(self, form: FilterForm) -> None:
        entry = FilterEntryForm(form, 0, Filter("name", "=~", "Rex"))
        assert hidden_inputs_for_filter(entry) == [
            HiddenInput("flop_filters_0_field", "filters[0][field]", "name"),
            HiddenInput("flop_filters_0_op", "filters[0][op]", "=~"),
        ]

    def test_form_keeps_sort_and_page_size(self, form: FilterForm) -> None:
        assert hidden_inputs_for_filter(form) == [
            HiddenInput("flop_order_by_0", "order_by[]", "name"),
            HiddenInput("flop_page_size", "page_size", 10),
        ]

    def test_list_values_expanded(self) -> None:
        meta = Meta(flop=Flop(order_by=["name", "age"], order_directions=["asc", "desc"]))
        inputs = hidden_inputs_for_filter(FilterForm(meta, id="f"))
        assert [(i.id, i.name, i.value) for i in inputs] == [
            ("f_order_directions_0", "order_directions[]", "asc"),
            ("f_order_directions_1", "order_directions[]", "desc"),
            ("f_order_by_0", "order_by[]", "name"),
            ("f_order_by_1", "order_by[]", "age"),
        ]

    def test_cursor_position_dropped(self) -> None:
        meta = Meta(flop=Flop(first=10, after="abc"))
        assert hidden_inputs_for_filter(FilterForm(meta)) == [HiddenInput("flop_first", "first", 10)]

    def test_requires_form(self, meta: Meta) -> None:
        with pytest.raises(InvalidFormError):
            hidden_inputs_for_filter(meta)
