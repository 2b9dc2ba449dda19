#!/usr/bin/env python3
import pytest
from pydantic import ValidationError

from myapp.core.commands import ServerCommand
from myapp.core.formatting import format_validation_errors, _format_error_loc


@pytest.mark.parametrize("loc,labels,expected", [
    (("port",), {"port": "-p/--port"}, "-p/--port"),
    (("action", "key"), {}, "action.key"),
    ((), {}, "<command>"),
    (("items", 0), {}, "items.0"),
])
def test_format_error_loc(loc, labels, expected):
    assert _format_error_loc(loc, labels) == expected


def test_format_validation_errors_from_real_pydantic_error():
    with pytest.raises(ValidationError) as info:
        ServerCommand(port=70000)

    msgs = format_validation_errors(info.value, {"port": "-p/--port"})
    assert len(msgs) == 1
    assert msgs[0].startswith("-p/--port: Input should be less than or equal to 65535")


def test_format_validation_errors_without_errors_attr_uses_first_line():
    exc = ValueError("Boom!\nDetails that should be ignored")
    assert format_validation_errors(exc) == ["Boom!"]


def test_format_validation_errors_when_errors_method_raises():
    class Exploding(Exception):
        def errors(self):
            raise RuntimeError("nope")

    assert format_validation_errors(Exploding("Top line only\nrest")) == ["Top line only"]
