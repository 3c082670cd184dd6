import pytest

from argsmith import AccessError, ConfigurationError, Kind


def test_registry_default_help(registry):
    assert "-h" in registry
    assert "--help" in registry
    assert registry.help_spec is registry.find("--help")
    assert registry.help_spec.help == "show this help message and exit"
    assert len(registry) == 1


def test_registry_aliases_sorted(registry):
    spec = registry.register(["--verbose", "-v", "--chatty"])
    assert spec.aliases == ("-v", "--chatty", "--verbose")
    assert spec.name == "-v"
    assert registry.find("--chatty") is spec


def test_registry_aliases_from_string(registry):
    spec = registry.register("--only")
    assert spec.aliases == ("--only",)


def test_registry_registration_order(registry):
    a = registry.register("-b")
    b = registry.register("-a")
    assert list(registry)[1:] == [a, b]


@pytest.mark.parametrize(
    "aliases, msg",
    [
        (["x"], "invalid flag not start by '-' character"),
        (["-"], "invalid flag not be only '-' character"),
        (["--"], "invalid flag not be only '--' characters"),
        (["-ab"], "invalid short flag has not only one character"),
        (["--a$b"], "invalid flag character"),
        (["-$"], "invalid flag character"),
        (["---triple"], "invalid flag character"),
    ],
)
def test_registry_bad_option_alias(registry, aliases, msg):
    with pytest.raises(ConfigurationError) as e:
        registry.register(aliases)
    assert e.value.msg == msg
    assert e.value.argument == aliases[0]


def test_registry_empty_aliases(registry):
    with pytest.raises(ConfigurationError) as e:
        registry.register([])
    assert e.value.msg == "invalid empty flag"


def test_registry_duplicate_option(registry):
    registry.register(["-v", "--verbose"])
    with pytest.raises(ConfigurationError) as e:
        registry.register(["--verbose"], Kind.SIMPLE)
    assert e.value.msg == "invalid flag already exist"
    assert e.value.argument == "--verbose"


def test_registry_duplicate_within_call(registry):
    with pytest.raises(ConfigurationError):
        registry.register(["--same", "--same"])


def test_registry_duplicate_help_alias(registry):
    with pytest.raises(ConfigurationError) as e:
        registry.register(["-h", "--host"], Kind.SIMPLE)
    assert e.value.argument == "-h"


def test_registry_positional(registry):
    spec = registry.register("FILE", Kind.POSITIONAL)
    assert spec.is_positional
    assert registry.positionals == [spec]


def test_registry_positional_duplicate(registry):
    registry.register("FILE", Kind.POSITIONAL)
    with pytest.raises(ConfigurationError) as e:
        registry.register("FILE", Kind.POSITIONAL)
    assert e.value.msg == "bad name argument already exist"


def test_registry_positional_multiple_names(registry):
    with pytest.raises(ConfigurationError) as e:
        registry.register(["a", "b"], Kind.POSITIONAL)
    assert e.value.msg == "positional argument has only one name"


def test_registry_positional_bad_character(registry):
    with pytest.raises(ConfigurationError) as e:
        registry.register("na me", Kind.POSITIONAL)
    assert e.value.msg == "bad name argument character"


@pytest.mark.parametrize("name", ["-x", "--name"])
def test_registry_positional_leading_dash(registry, name):
    with pytest.raises(ConfigurationError) as e:
        registry.register(name, Kind.POSITIONAL)
    assert e.value.msg == "bad name argument"
    assert e.value.argument == name
    assert name not in registry


@pytest.mark.parametrize("kind", [Kind.FIXED_TUPLE, Kind.REPEATED_TUPLE])
@pytest.mark.parametrize("fixed_count", [0, 1, "+"])
def test_registry_tuple_count(registry, kind, fixed_count):
    with pytest.raises(ConfigurationError) as e:
        registry.register("--pair", kind, fixed_count=fixed_count)
    assert e.value.msg == "tuple option needs a number of argument greater than 1"


@pytest.mark.parametrize(
    "kind, fixed_count, defaults",
    [
        (Kind.BOOLEAN, 1, ["x"]),
        (Kind.SIMPLE, 1, ["a", "b"]),
        (Kind.FIXED_TUPLE, 3, ["a", "b"]),
        (Kind.REPEATED_TUPLE, 2, ["a", "b", "c"]),
        (Kind.POSITIONAL, 1, ["a", "b"]),
    ],
)
def test_registry_defaults_mismatch(registry, kind, fixed_count, defaults):
    aliases = "NAME" if kind is Kind.POSITIONAL else ["-n", "--name"]
    with pytest.raises(ConfigurationError) as e:
        registry.register(aliases, kind, fixed_count=fixed_count, defaults=defaults)
    assert e.value.msg == "invalid number of argument with number of default argument"
    assert e.value.argument == ("NAME" if kind is Kind.POSITIONAL else "--name")


def test_registry_required_ignores_defaults(registry):
    spec = registry.register("--name", Kind.SIMPLE, required=True, defaults=["a", "b", "c"])
    assert spec.defaults == ()
    assert spec.node.exists is False


def test_registry_replace_help(registry):
    spec = registry.register(["-u", "--usage"], is_help=True)
    assert registry.help_spec is spec
    assert "-h" not in registry
    assert "--help" not in registry
    # The freed aliases are available again.
    registry.register(["-h", "--host"], Kind.SIMPLE)


def test_registry_help_must_be_boolean(registry):
    with pytest.raises(ConfigurationError) as e:
        registry.register("--usage", Kind.SIMPLE, is_help=True)
    assert e.value.msg == "help option must be a boolean"


def test_registry_remove_help(registry):
    registry.remove_help()
    assert registry.help_spec is None
    assert len(registry) == 0
    registry.remove_help()


def test_registry_lookup_unknown(registry):
    with pytest.raises(AccessError) as e:
        registry.lookup("--missing")
    assert str(e.value) == "option not found -- '--missing'"


def test_registry_sorted(registry):
    registry.register("ZETA", Kind.POSITIONAL)
    registry.register("--long-only")
    registry.register(["-a", "--alpha"])
    registry.register("ALPHA", Kind.POSITIONAL)
    registry.register("--after")

    assert [x.name for x in registry.sorted()] == ["-a", "-h", "--after", "--long-only", "ALPHA", "ZETA"]


@pytest.mark.parametrize(
    "aliases, kind, fixed_count, expected",
    [
        (["-s", "--simple"], Kind.SIMPLE, 1, "SIMPLE"),
        (["-s"], Kind.SIMPLE, 1, "S"),
        (["--pair"], Kind.FIXED_TUPLE, 2, "PAIR PAIR"),
        (["--multi"], Kind.VARIADIC, 1, "MULTI..."),
        (["--many"], Kind.REPEATED_VARIADIC, 1, "MANY..."),
        (["--opt-name"], Kind.REPEATED_SIMPLE, 1, "OPT-NAME"),
    ],
)
def test_registry_derived_arg_help(registry, aliases, kind, fixed_count, expected):
    assert registry.register(aliases, kind, fixed_count=fixed_count).arg_help == expected


def test_registry_explicit_arg_help(registry):
    assert registry.register("--num", Kind.SIMPLE, arg_help="N").arg_help == "N"
    assert registry.register("--flag").arg_help == ""
