import pytest

from argsmith import AccessError, ConversionError, Kind


def test_view_unknown_alias(parser):
    with pytest.raises(AccessError) as e:
        parser.get("--nope")
    assert e.value.msg == "option not found"
    assert "--nope" not in parser


def test_view_lookup_by_any_alias(parser):
    parser.register(["-v", "--verbose"])
    assert parser["-v"].aliases == parser["--verbose"].aliases == ("-v", "--verbose")
    assert parser["--verbose"].name == "-v"


def test_view_is_snapshot(parser, parse):
    parser.register(["--include"], Kind.REPEATED_SIMPLE)
    parse("--include a")
    values = parser["--include"].values
    values.append("b")
    assert parser["--include"].values == ["a"]


def test_view_metadata(parser):
    parser.register(["-n"], Kind.SIMPLE, help="a number", required=True, arg_help="N")
    view = parser["-n"]
    assert view.kind is Kind.SIMPLE
    assert view.help == "a number"
    assert view.required is True
    assert view.arg_help == "N"
    assert not view


@pytest.mark.parametrize(
    "kind, fixed_count, accessor",
    [
        (Kind.BOOLEAN, 1, "value"),
        (Kind.BOOLEAN, 1, "values"),
        (Kind.SIMPLE, 1, "flag"),
        (Kind.SIMPLE, 1, "values"),
        (Kind.VARIADIC, 1, "value"),
        (Kind.VARIADIC, 1, "tuples"),
        (Kind.REPEATED_TUPLE, 2, "values"),
        (Kind.FIXED_TUPLE, 2, "tuples"),
    ],
)
def test_view_incompatible(parser, kind, fixed_count, accessor):
    parser.register(["--arg"], kind, fixed_count=fixed_count)
    with pytest.raises(ConversionError) as e:
        getattr(parser["--arg"], accessor)
    assert e.value.argument == "--arg"
    assert "not authorized" in e.value.msg


def test_view_convert_scalar(parser, parse):
    parser.register(["-n"], Kind.SIMPLE)
    parse("-n 0x1F")
    assert parser["-n"].convert(int) == 31


def test_view_convert_unset(parser):
    parser.register(["-n"], Kind.SIMPLE)
    assert parser["-n"].convert(int) is None


def test_view_convert_list(parser, parse):
    parser.register(["--nums"], Kind.VARIADIC)
    parse("--nums 1 2.5 -3")
    assert parser["--nums"].convert(float) == [1.0, 2.5, -3.0]


def test_view_convert_tuples(parser, parse):
    parser.register(["--xy"], Kind.REPEATED_TUPLE, fixed_count=2)
    parse("--xy 1 2 --xy 3 4")
    assert parser["--xy"].convert(int) == [(1, 2), (3, 4)]


def test_view_convert_flag(parser, parse):
    parser.register(["-v"])
    parse("-v")
    assert parser["-v"].convert(int) == 1


def test_view_convert_failure(parser, parse):
    parser.register(["-n"], Kind.SIMPLE)
    parse("-n 12abc")
    with pytest.raises(ConversionError) as e:
        parser["-n"].convert(int)
    assert e.value.value == "12abc"
    assert e.value.target_type is int


def test_view_scalar_not_indexable(parser, parse):
    parser.register(["-n"], Kind.SIMPLE)
    parse("-n 1")
    with pytest.raises(ConversionError):
        parser["-n"][0]


@pytest.mark.parametrize("kind", [Kind.BOOLEAN, Kind.REVERSE_BOOLEAN])
def test_view_flag_has_no_length(parser, parse, kind):
    parser.register(["-v"], kind)
    parse("-vvv")
    view = parser["-v"]
    assert view.count == 3
    assert bool(view) is True
    with pytest.raises(ConversionError):
        len(view)
