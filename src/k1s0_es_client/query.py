"""Query DSL: query and filter nodes and the builders that produce them.

Each kind of query or filter has a builder whose constructor takes the
required arguments. Optional modifiers are chained ``with_*`` calls, and
``build()`` returns an immutable node. Modifiers that were never set do not
appear in the serialised form.

    query = Query.build_filtered(
        Filter.build_range("int_field").with_gte(2).with_lte(3).build()
    ).build()
    query.to_dict()
    # {"filtered": {"filter": {"range": {"int_field": {"gte": 2, "lte": 3}}}}}
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeVar

from .encoding import encode_json

N = TypeVar("N", bound="_Node")


class Operator(StrEnum):
    """Boolean operator used to combine analysed terms."""

    AND = "and"
    OR = "or"


class ZeroTermsQuery(StrEnum):
    """Behaviour of a match query whose analyser removes every term."""

    NONE = "none"
    ALL = "all"


@dataclass(frozen=True)
class _Node:
    """A built node. The body is held as compact JSON, so nodes are hashable
    and nothing reachable from them can be changed after ``build()``.
    """

    operator: str
    encoded_body: str

    @classmethod
    def _of(cls: type[N], operator: str, body: Any) -> N:
        return cls(operator, encode_json(body))

    def to_dict(self) -> dict[str, Any]:
        """Wire form; a fresh copy on every call."""
        return {self.operator: json.loads(self.encoded_body)}


@dataclass(frozen=True)
class Query(_Node):
    """A finalised query node."""

    @staticmethod
    def build_match_all() -> MatchAllQueryBuilder:
        return MatchAllQueryBuilder()

    @staticmethod
    def build_match(field: str, value: Any) -> MatchQueryBuilder:
        return MatchQueryBuilder(field, value)

    @staticmethod
    def build_term(field: str, value: Any) -> TermQueryBuilder:
        return TermQueryBuilder(field, value)

    @staticmethod
    def build_terms(field: str, values: list[Any]) -> TermsQueryBuilder:
        return TermsQueryBuilder(field, values)

    @staticmethod
    def build_bool() -> BoolQueryBuilder:
        return BoolQueryBuilder()

    @staticmethod
    def build_query_string(query: str) -> QueryStringQueryBuilder:
        return QueryStringQueryBuilder(query)

    @staticmethod
    def build_filtered(filter: Filter) -> FilteredQueryBuilder:
        return FilteredQueryBuilder(filter)


@dataclass(frozen=True)
class Filter(_Node):
    """A finalised filter node."""

    @staticmethod
    def build_match_all() -> MatchAllFilterBuilder:
        return MatchAllFilterBuilder()

    @staticmethod
    def build_range(field: str) -> RangeFilterBuilder:
        return RangeFilterBuilder(field)

    @staticmethod
    def build_term(field: str, value: Any) -> TermFilterBuilder:
        return TermFilterBuilder(field, value)

    @staticmethod
    def build_terms(field: str, values: list[Any]) -> TermsFilterBuilder:
        return TermsFilterBuilder(field, values)

    @staticmethod
    def build_exists(field: str) -> ExistsFilterBuilder:
        return ExistsFilterBuilder(field)

    @staticmethod
    def build_missing(field: str) -> MissingFilterBuilder:
        return MissingFilterBuilder(field)

    @staticmethod
    def build_bool() -> BoolFilterBuilder:
        return BoolFilterBuilder()

    @staticmethod
    def build_and(*filters: Filter) -> AndFilterBuilder:
        return AndFilterBuilder(filters)

    @staticmethod
    def build_or(*filters: Filter) -> OrFilterBuilder:
        return OrFilterBuilder(filters)

    @staticmethod
    def build_not(filter: Filter) -> NotFilterBuilder:
        return NotFilterBuilder(filter)

    @staticmethod
    def build_query(query: Query) -> QueryFilterBuilder:
        return QueryFilterBuilder(query)


def _expect(node: Any, cls: type[_Node], role: str) -> Any:
    if not isinstance(node, cls):
        raise TypeError(f"{role} must be a {cls.__name__}, got {type(node).__name__}")
    return node


def _expect_all(nodes: tuple[Any, ...], cls: type[_Node], role: str) -> list[Any]:
    return [_expect(n, cls, role) for n in nodes]


def _wire(nodes: list[_Node]) -> list[dict[str, Any]]:
    return [n.to_dict() for n in nodes]


class _Builder:
    def __init__(self) -> None:
        self._options: dict[str, Any] = {}

    def _set(self, key: str, value: Any) -> Any:
        if isinstance(value, StrEnum):
            value = value.value
        self._options[key] = value
        return self

    def _snapshot(self) -> dict[str, Any]:
        return copy.deepcopy(self._options)


# Queries


class MatchAllQueryBuilder(_Builder):
    def with_boost(self, boost: float) -> MatchAllQueryBuilder:
        return self._set("boost", boost)

    def build(self) -> Query:
        return Query._of("match_all", self._snapshot())


class MatchQueryBuilder(_Builder):
    """Full-text ``match`` query on a single field."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__()
        self._field = field
        self._value = value

    def with_lenient(self, lenient: bool) -> MatchQueryBuilder:
        return self._set("lenient", lenient)

    def with_operator(self, operator: Operator | str) -> MatchQueryBuilder:
        return self._set("operator", operator)

    def with_analyzer(self, analyzer: str) -> MatchQueryBuilder:
        return self._set("analyzer", analyzer)

    def with_boost(self, boost: float) -> MatchQueryBuilder:
        return self._set("boost", boost)

    def with_fuzziness(self, fuzziness: int | str) -> MatchQueryBuilder:
        return self._set("fuzziness", fuzziness)

    def with_minimum_should_match(self, value: int | str) -> MatchQueryBuilder:
        return self._set("minimum_should_match", value)

    def with_zero_terms_query(self, value: ZeroTermsQuery | str) -> MatchQueryBuilder:
        return self._set("zero_terms_query", value)

    def build(self) -> Query:
        inner = {"query": copy.deepcopy(self._value)}
        inner.update(self._snapshot())
        return Query._of("match", {self._field: inner})


class TermQueryBuilder(_Builder):
    def __init__(self, field: str, value: Any) -> None:
        super().__init__()
        self._field = field
        self._value = value

    def with_boost(self, boost: float) -> TermQueryBuilder:
        return self._set("boost", boost)

    def build(self) -> Query:
        inner = {"value": copy.deepcopy(self._value)}
        inner.update(self._snapshot())
        return Query._of("term", {self._field: inner})


class TermsQueryBuilder(_Builder):
    def __init__(self, field: str, values: list[Any]) -> None:
        super().__init__()
        self._field = field
        self._values = list(values)

    def with_minimum_should_match(self, value: int | str) -> TermsQueryBuilder:
        return self._set("minimum_should_match", value)

    def with_boost(self, boost: float) -> TermsQueryBuilder:
        return self._set("boost", boost)

    def build(self) -> Query:
        body = {self._field: copy.deepcopy(self._values)}
        body.update(self._snapshot())
        return Query._of("terms", body)


class BoolQueryBuilder(_Builder):
    """Compound query; clause lists are only emitted when non-empty."""

    def __init__(self) -> None:
        super().__init__()
        self._must: list[Query] = []
        self._should: list[Query] = []
        self._must_not: list[Query] = []

    def with_must(self, *queries: Query) -> BoolQueryBuilder:
        self._must.extend(_expect_all(queries, Query, "bool must clause"))
        return self

    def with_should(self, *queries: Query) -> BoolQueryBuilder:
        self._should.extend(_expect_all(queries, Query, "bool should clause"))
        return self

    def with_must_not(self, *queries: Query) -> BoolQueryBuilder:
        self._must_not.extend(_expect_all(queries, Query, "bool must_not clause"))
        return self

    def with_minimum_should_match(self, value: int | str) -> BoolQueryBuilder:
        return self._set("minimum_should_match", value)

    def with_boost(self, boost: float) -> BoolQueryBuilder:
        return self._set("boost", boost)

    def build(self) -> Query:
        body: dict[str, Any] = {}
        for key, clauses in (
            ("must", self._must),
            ("should", self._should),
            ("must_not", self._must_not),
        ):
            if clauses:
                body[key] = _wire(clauses)
        body.update(self._snapshot())
        return Query._of("bool", body)


class QueryStringQueryBuilder(_Builder):
    def __init__(self, query: str) -> None:
        super().__init__()
        self._query = query

    def with_default_field(self, field: str) -> QueryStringQueryBuilder:
        return self._set("default_field", field)

    def with_default_operator(self, operator: Operator | str) -> QueryStringQueryBuilder:
        return self._set("default_operator", operator)

    def with_analyzer(self, analyzer: str) -> QueryStringQueryBuilder:
        return self._set("analyzer", analyzer)

    def with_lenient(self, lenient: bool) -> QueryStringQueryBuilder:
        return self._set("lenient", lenient)

    def build(self) -> Query:
        body: dict[str, Any] = {"query": self._query}
        body.update(self._snapshot())
        return Query._of("query_string", body)


class FilteredQueryBuilder(_Builder):
    """Wraps exactly one filter, optionally narrowing an inner query."""

    def __init__(self, filter: Filter) -> None:
        super().__init__()
        self._filter = _expect(filter, Filter, "filtered query filter")
        self._query: Query | None = None

    def with_query(self, query: Query) -> FilteredQueryBuilder:
        self._query = _expect(query, Query, "filtered query inner query")
        return self

    def build(self) -> Query:
        body: dict[str, Any] = {}
        if self._query is not None:
            body["query"] = self._query.to_dict()
        body["filter"] = self._filter.to_dict()
        return Query._of("filtered", body)


# Filters


class MatchAllFilterBuilder(_Builder):
    def build(self) -> Filter:
        return Filter._of("match_all", {})


class RangeFilterBuilder(_Builder):
    def __init__(self, field: str) -> None:
        super().__init__()
        self._field = field

    def with_gte(self, value: Any) -> RangeFilterBuilder:
        return self._set("gte", value)

    def with_gt(self, value: Any) -> RangeFilterBuilder:
        return self._set("gt", value)

    def with_lte(self, value: Any) -> RangeFilterBuilder:
        return self._set("lte", value)

    def with_lt(self, value: Any) -> RangeFilterBuilder:
        return self._set("lt", value)

    def with_format(self, format: str) -> RangeFilterBuilder:
        return self._set("format", format)

    def build(self) -> Filter:
        return Filter._of("range", {self._field: self._snapshot()})


class TermFilterBuilder(_Builder):
    def __init__(self, field: str, value: Any) -> None:
        super().__init__()
        self._field = field
        self._value = value

    def build(self) -> Filter:
        return Filter._of("term", {self._field: copy.deepcopy(self._value)})


class TermsFilterBuilder(_Builder):
    def __init__(self, field: str, values: list[Any]) -> None:
        super().__init__()
        self._field = field
        self._values = list(values)

    def with_execution(self, execution: str) -> TermsFilterBuilder:
        return self._set("execution", execution)

    def build(self) -> Filter:
        body = {self._field: copy.deepcopy(self._values)}
        body.update(self._snapshot())
        return Filter._of("terms", body)


class ExistsFilterBuilder(_Builder):
    def __init__(self, field: str) -> None:
        super().__init__()
        self._field = field

    def build(self) -> Filter:
        return Filter._of("exists", {"field": self._field})


class MissingFilterBuilder(_Builder):
    def __init__(self, field: str) -> None:
        super().__init__()
        self._field = field

    def with_existence(self, existence: bool) -> MissingFilterBuilder:
        return self._set("existence", existence)

    def with_null_value(self, null_value: bool) -> MissingFilterBuilder:
        return self._set("null_value", null_value)

    def build(self) -> Filter:
        body: dict[str, Any] = {"field": self._field}
        body.update(self._snapshot())
        return Filter._of("missing", body)


class BoolFilterBuilder(_Builder):
    def __init__(self) -> None:
        super().__init__()
        self._must: list[Filter] = []
        self._should: list[Filter] = []
        self._must_not: list[Filter] = []

    def with_must(self, *filters: Filter) -> BoolFilterBuilder:
        self._must.extend(_expect_all(filters, Filter, "bool must clause"))
        return self

    def with_should(self, *filters: Filter) -> BoolFilterBuilder:
        self._should.extend(_expect_all(filters, Filter, "bool should clause"))
        return self

    def with_must_not(self, *filters: Filter) -> BoolFilterBuilder:
        self._must_not.extend(_expect_all(filters, Filter, "bool must_not clause"))
        return self

    def build(self) -> Filter:
        body: dict[str, Any] = {}
        for key, clauses in (
            ("must", self._must),
            ("should", self._should),
            ("must_not", self._must_not),
        ):
            if clauses:
                body[key] = _wire(clauses)
        return Filter._of("bool", body)


class AndFilterBuilder(_Builder):
    def __init__(self, filters: tuple[Filter, ...]) -> None:
        super().__init__()
        self._filters = _expect_all(filters, Filter, "and clause")

    def build(self) -> Filter:
        return Filter._of("and", _wire(self._filters))


class OrFilterBuilder(_Builder):
    def __init__(self, filters: tuple[Filter, ...]) -> None:
        super().__init__()
        self._filters = _expect_all(filters, Filter, "or clause")

    def build(self) -> Filter:
        return Filter._of("or", _wire(self._filters))


class NotFilterBuilder(_Builder):
    def __init__(self, filter: Filter) -> None:
        super().__init__()
        self._filter = _expect(filter, Filter, "not filter")

    def build(self) -> Filter:
        return Filter._of("not", {"filter": self._filter.to_dict()})


class QueryFilterBuilder(_Builder):
    def __init__(self, query: Query) -> None:
        super().__init__()
        self._query = _expect(query, Query, "query filter")

    def build(self) -> Filter:
        return Filter._of("query", self._query.to_dict())
