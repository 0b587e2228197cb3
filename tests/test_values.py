"""Unit tests for literal rendering and parameter helpers."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from sqlparts.errors import UnsupportedValueError
from sqlparts.fragment.nodes import Placeholder, list_
from sqlparts.fragment.values import (
    format_time,
    param,
    param_bool,
    param_bools,
    param_int,
    param_ints,
    param_string,
    param_strings,
    param_time,
    params,
    value,
    value_bool,
    value_int,
    value_string,
    value_time,
)

TS = datetime(2001, 2, 3, 4, 5, 6, tzinfo=timezone.utc)


def _sql(part) -> str:
    return part.render().sql


# ---------------------------------------------------------------------------
# value() dispatch
# ---------------------------------------------------------------------------


class TestValue:
    def test_string(self):
        assert _sql(value("string")) == "'string'"

    def test_int(self):
        assert _sql(value(123)) == "123"
        assert _sql(value(-123)) == "-123"

    def test_timestamp(self):
        assert _sql(value(datetime.fromisoformat("2001-02-03T04:05:06+00:00"))) == "'2001-02-03 04:05:06'"

    def test_bool_is_not_treated_as_int(self):
        assert _sql(value(True)) == "TRUE"
        assert _sql(value(False)) == "FALSE"

    def test_literals_carry_no_params(self):
        assert value("x").render().params == []

    @pytest.mark.parametrize(
        "bad",
        [None, object(), ["value", 1, False], 1.5, Decimal("1.0"), date(2001, 2, 3), b"raw"],
    )
    def test_unsupported_types_fail_fast(self, bad):
        with pytest.raises(UnsupportedValueError) as exc_info:
            value(bad)
        assert exc_info.value.value_type == type(bad).__name__


class TestTypedValues:
    def test_value_string_does_not_escape(self):
        assert _sql(value_string("it's")) == "'it's'"

    def test_value_int(self):
        assert _sql(value_int(123)) == "123"
        assert _sql(value_int(-123)) == "-123"

    def test_value_time_keeps_own_zone(self):
        plus_two = timezone(timedelta(hours=2))
        assert _sql(value_time(TS)) == "'2001-02-03 04:05:06'"
        assert _sql(value_time(TS.astimezone(plus_two))) == "'2001-02-03 06:05:06'"

    def test_value_time_drops_subseconds(self):
        assert _sql(value_time(datetime(2001, 2, 3, 4, 5, 6, 999999))) == "'2001-02-03 04:05:06'"

    def test_value_bool(self):
        assert _sql(value_bool(True)) == "TRUE"
        assert _sql(value_bool(False)) == "FALSE"

    @pytest.mark.parametrize(
        "fn, bad",
        [
            (value_string, 1),
            (value_int, "1"),
            (value_int, True),
            (value_time, "2001-02-03"),
            (value_bool, 1),
        ],
    )
    def test_type_mismatch_raises(self, fn, bad):
        with pytest.raises(UnsupportedValueError):
            fn(bad)


def test_format_time_pads_year():
    assert format_time(datetime(5, 1, 2, 3, 4, 5)) == "0005-01-02 03:04:05"


# ---------------------------------------------------------------------------
# Params
# ---------------------------------------------------------------------------


class TestParams:
    def test_param_bool(self):
        for v in (True, False):
            r = param_bool(v).render()
            assert r.sql == "?"
            assert r.params == [v]

    def test_param_int(self):
        r = param_int(123).render()
        assert r.sql == "?"
        assert r.params == [123]

    def test_param_string(self):
        r = param_string("string").render()
        assert r.sql == "?"
        assert r.params == ["string"]

    def test_param_time(self):
        assert param_time(TS).render().params == [TS]

    @pytest.mark.parametrize("v", [123, "string", True, TS, None])
    def test_param_accepts_bound_values(self, v):
        r = param(v).render()
        assert r.sql == "?"
        assert r.params == [v]

    @pytest.mark.parametrize("bad", [1.5, object(), [1, 2], {"a": 1}, date(2001, 2, 3)])
    def test_param_rejects_other_types(self, bad):
        with pytest.raises(UnsupportedValueError):
            param(bad)

    def test_typed_params_check_type(self):
        with pytest.raises(UnsupportedValueError):
            param_int(False)
        with pytest.raises(UnsupportedValueError):
            param_string(5)
        with pytest.raises(UnsupportedValueError):
            param_bool("yes")
        with pytest.raises(UnsupportedValueError):
            param_time(None)


class TestBatchParams:
    def test_param_bools(self):
        assert param_bools([True, False]) == [param_bool(True), param_bool(False)]

    def test_param_ints(self):
        assert param_ints([123, -123]) == [param_int(123), param_int(-123)]

    def test_param_strings(self):
        assert param_strings(["string_1", "string_2"]) == [
            param_string("string_1"),
            param_string("string_2"),
        ]

    def test_params_mixed(self):
        ps = params([True, 123, "string_1"])
        assert ps == [param(True), param(123), param("string_1")]
        assert ps == [param_bool(True), param_int(123), param_string("string_1")]
        assert all(isinstance(p, Placeholder) for p in ps)

    def test_batch_preserves_order_when_rendered(self):
        r = list_(*param_ints(range(5))).render()
        assert r.sql == "?, ?, ?, ?, ?"
        assert r.params == [0, 1, 2, 3, 4]
