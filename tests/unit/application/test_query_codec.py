"""Unit tests for the query codec and the bracket wire encoding."""

from __future__ import annotations

from querylinks.application.query import decode_query, encode_query, to_query
from querylinks.application.state import Filter, FilterOp, Flop, OrderDirection
from querylinks.config.defaults import SchemaRegistry, configure, default_registry
from querylinks.config.settings import QueryLinksSettings


# ---------------------------------------------------------------------------
# to_query
# ---------------------------------------------------------------------------


class TestToQuery:
    def test_empty(self) -> None:
        assert to_query(Flop()) == {}

    def test_page_params_order(self) -> None:
        params = to_query(Flop(page=5, page_size=20))
        assert list(params.items()) == [("page_size", 20), ("page", 5)]

    def test_order_params(self) -> None:
        params = to_query(Flop(order_by=["name", "age"], order_directions=["desc", "asc"]))
        assert list(params.items()) == [
            ("order_directions", ["desc", "asc"]),
            ("order_by", ["name", "age"]),
        ]

    def test_cursor_params(self) -> None:
        assert list(to_query(Flop(first=10, after="g3")).items()) == [("first", 10), ("after", "g3")]

    def test_full_rule_order(self) -> None:
        flop = Flop(
            offset=5,
            page=2,
            page_size=3,
            limit=4,
            first=6,
            last=7,
            after="a",
            before="b",
            order_by=["name"],
            order_directions=["asc"],
            filters=[Filter("name")],
        )
        assert list(to_query(flop)) == [
            "filters",
            "order_directions",
            "order_by",
            "last",
            "first",
            "limit",
            "page_size",
            "before",
            "after",
            "page",
            "offset",
        ]

    def test_first_page_and_zero_offset_omitted(self) -> None:
        assert to_query(Flop(page=1, offset=0)) == {}

    def test_empty_sequences_omitted(self) -> None:
        assert to_query(Flop(order_by=[], order_directions=[], filters=[])) == {}

    def test_filters(self) -> None:
        flop = Flop(filters=[Filter("name", "=~", "Mag"), Filter("age", FilterOp.GT, 2)])
        assert to_query(flop) == {
            "filters": {
                "0": {"field": "name", "op": "=~", "value": "Mag"},
                "1": {"field": "age", "op": ">", "value": 2},
            }
        }

    def test_explicit_default_limit(self) -> None:
        flop = Flop(page=5, page_size=20)
        assert to_query(flop, {"default_limit": 20}) == {"page": 5}
        assert to_query(Flop(limit=20, offset=40), {"default_limit": 20}) == {"offset": 40}

    def test_explicit_default_order(self) -> None:
        flop = Flop(order_by=["name"], order_directions=["asc"])
        opts = {"default_order": {"order_by": ["name"], "order_directions": ["asc"]}}
        assert to_query(flop, opts) == {}
        flipped = flop.replace(order_directions=(OrderDirection.DESC,))
        assert to_query(flipped, opts) == {"order_directions": ["desc"], "order_by": ["name"]}

    def test_schema_defaults(self) -> None:
        registry = SchemaRegistry()
        registry.register("pets", default_limit=25)
        assert to_query(Flop(page_size=25, page=2), {"for": "pets"}, registry=registry) == {"page": 2}

    def test_default_registry_defaults(self) -> None:
        default_registry.register("pets", default_order={"order_by": ["name"], "order_directions": ["asc"]})
        flop = Flop(order_by=["name"], order_directions=["asc"], page=2)
        assert to_query(flop, {"for": "pets"}) == {"page": 2}

    def test_settings_defaults(self) -> None:
        assert to_query(Flop(limit=50), settings=QueryLinksSettings(default_limit=50)) == {}
        configure(QueryLinksSettings(default_limit=10))
        assert to_query(Flop(first=10, after="x")) == {"after": "x"}


# ---------------------------------------------------------------------------
# encode_query / decode_query
# ---------------------------------------------------------------------------


class TestEncodeQuery:
    def test_scalar(self) -> None:
        assert encode_query({"page": 2}) == "page=2"

    def test_lists_keep_order(self) -> None:
        params = to_query(Flop(order_by=["name", "age"], order_directions=["desc", "asc"]))
        assert encode_query(params) == (
            "order_directions[]=desc&order_directions[]=asc&order_by[]=name&order_by[]=age"
        )

    def test_nested_filters(self) -> None:
        params = to_query(Flop(filters=[Filter("name", "=~", "Mag")]))
        assert encode_query(params) == (
            "filters[0][field]=name&filters[0][op]=%3D~&filters[0][value]=Mag"
        )

    def test_values_form_encoded(self) -> None:
        assert encode_query({"q": "a b&c/d"}) == "q=a+b%26c%2Fd"

    def test_none_and_bool(self) -> None:
        assert encode_query({"a": None, "b": True, "c": False}) == "a=&b=true&c=false"

    def test_enum_by_value(self) -> None:
        assert encode_query({"dir": OrderDirection.DESC}) == "dir=desc"

    def test_pairs(self) -> None:
        assert encode_query([("b", 1), ("a", 2)]) == "b=1&a=2"

    def test_empty(self) -> None:
        assert encode_query({}) == ""


class TestDecodeQuery:
    def test_scalars_and_lists(self) -> None:
        assert decode_query("order_by[]=name&order_by[]=age&page=2") == {
            "order_by": ["name", "age"],
            "page": "2",
        }

    def test_indexed_filters(self) -> None:
        query = "filters[0][field]=name&filters[0][op]=%3D~&filters[0][value]=Mag+Pie"
        assert decode_query(query) == {
            "filters": {"0": {"field": "name", "op": "=~", "value": "Mag Pie"}}
        }

    def test_list_of_maps(self) -> None:
        assert decode_query("f[][field]=a&f[][op]=%3D%3D&f[][field]=b") == {
            "f": [{"field": "a", "op": "=="}, {"field": "b"}]
        }

    def test_blank_values_kept(self) -> None:
        assert decode_query("a=&b=1") == {"a": "", "b": "1"}

    def test_percent_encoded_brackets(self) -> None:
        assert decode_query("order_by%5B%5D=name") == {"order_by": ["name"]}

    def test_reverses_encoding(self) -> None:
        params = {"page": "3", "order_by": ["a", "b"], "filters": {"0": {"field": "x", "value": "1 2"}}}
        assert decode_query(encode_query(params)) == params
