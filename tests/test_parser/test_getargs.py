import pytest

from flagspec import (
    HelpSignal,
    ParseConfig,
    SettingsError,
    ValidationError,
    format_help,
    parse,
)
from flagspec.parser import build_definition_set

OPTIONS = ParseConfig(exit_on_process_error=False)


def test_flexible_syntax():
    definitions = {
        "a": " -n , --num : number [ ] = [ 1 , 2 ]; bla bla ",
        "b": " --flag : boolean ",
    }
    assert parse([], definitions, OPTIONS).options == {"a": [1, 2], "b": False}


def test_targets_and_rest():
    result = parse("a b - -- -a --foo".split(), {}, OPTIONS)
    assert result.targets == ["a", "b", "-"]
    assert result.options == {}
    assert result.rest == ["-a", "--foo"]


def test_example_command_line():
    result = parse(
        "a b -b 2 --baz2=1 --flag".split(),
        {
            "a": "--foo:number[]=[42]; hogehoge",
            "b": "-b,--bar:number=42; fugafuga",
            "c": '--baz:string; piyopiyo"',
            "d": "--baz2:string!; piyopiyo(required)",
            "e": "--flag:boolean; a flag",
        },
        OPTIONS,
    )
    assert result.targets == ["a", "b"]
    assert result.options == {"a": [42], "b": 2, "c": None, "d": "1", "e": True}
    assert result.rest == []


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("--a:string", None),
        ("--a:string[]", []),
        ("--a:number", None),
        ("--a:number[]", []),
        ("--a:boolean", False),
    ],
)
def test_no_default_value(spec, expected):
    assert parse([], {"a": spec}, OPTIONS).options == {"a": expected}


def test_array_default_round_trip():
    result = parse([], {"a": "-n,--num:number[]=[1,2]"}, OPTIONS)
    assert result.options["a"] == [1, 2]


@pytest.mark.parametrize("spec", ["--a:number!", "--a:string!"])
def test_required_value(spec):
    with pytest.raises(ValidationError):
        parse([], {"a": spec}, OPTIONS)


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("--a:boolean!", False),
        ("--a:number[]!", []),
        ("--a:string[]!", []),
    ],
)
def test_required_types_that_have_non_null_defaults(spec, expected):
    assert parse([], {"a": spec}, OPTIONS).options == {"a": expected}


def test_required_error_names_every_alias():
    with pytest.raises(ValidationError) as excinfo:
        parse([], {"a": "-a,--foo:number!"}, OPTIONS)
    message = str(excinfo.value)
    assert "-a" in message
    assert "--foo" in message
    assert "required" in message


@pytest.mark.parametrize("tokens", [["--foo="], ["--foo=true"], ["-a1"], ["-atrue"]])
def test_boolean_option_that_has_value(tokens):
    with pytest.raises(ValidationError):
        parse(tokens, {"s": "-a,--foo:boolean"}, OPTIONS)


def test_boolean_value_after_terminator_is_inert():
    result = parse(["--", "--foo=x", "-a1"], {"s": "-a,--foo:boolean"}, OPTIONS)
    assert result.options == {"s": False}
    assert result.rest == ["--foo=x", "-a1"]


def test_boolean_does_not_take_the_next_token():
    result = parse(["--foo", "x"], {"s": "-a,--foo:boolean"}, OPTIONS)
    assert result.options == {"s": True}
    assert result.targets == ["x"]


@pytest.mark.parametrize("spec", ["--a:number", "--a:number[]", "--a:string", "--a:string[]"])
def test_non_boolean_option_that_has_no_value(spec):
    with pytest.raises(ValidationError):
        parse(["--a"], {"s": spec}, OPTIONS)


@pytest.mark.parametrize(
    "spec", ["-a,--foo:number", "-a,--foo:number[]", "-a,--foo:string", "-a,--foo:string[]"]
)
def test_non_boolean_short_option_that_has_no_value(spec):
    with pytest.raises(ValidationError):
        parse(["-a"], {"s": spec}, OPTIONS)


def test_empty_string():
    assert parse(["--str="], {"s": "--str:string"}, OPTIONS).options == {"s": ""}


def test_empty_string_array():
    result = parse(["--str=", "--str="], {"s": "--str:string[]"}, OPTIONS)
    assert result.options == {"s": ["", ""]}


@pytest.mark.parametrize("command", ["--str=1", "-s 1", "-s1"])
def test_string_option_that_has_number_like_value(command):
    result = parse(command.split(), {"s": "-s,--str:string"}, OPTIONS)
    assert result.options == {"s": "1"}


@pytest.mark.parametrize("command", ["--str=1 --str=2", "-s 1 -s 2", "-s1 -s2"])
def test_string_array_option_that_has_number_like_value(command):
    result = parse(command.split(), {"s": "-s,--str:string[]"}, OPTIONS)
    assert result.options == {"s": ["1", "2"]}


@pytest.mark.parametrize("spec, expected", [("--a:string[]", ["1"]), ("--a:number[]", [1])])
def test_single_value_for_array_types(spec, expected):
    assert parse(["--a=1"], {"a": spec}, OPTIONS).options == {"a": expected}


@pytest.mark.parametrize(
    "spec, command",
    [
        ("--a:string", "--a=foo --a=bar"),
        ("-a,--aa:string", "-a foo --aa=bar"),
        ("-a,--aa:number", "-a 1 --aa=2"),
    ],
)
def test_multiple_values_for_non_array_types(spec, command):
    with pytest.raises(ValidationError) as excinfo:
        parse(command.split(), {"a": spec}, OPTIONS)
    assert "multiple values" in str(excinfo.value)


@pytest.mark.parametrize("command", ["--foo=1 -f 2", "-f 2 --foo=1", "-f2 --foo 1"])
def test_array_values_list_long_before_short(command):
    result = parse(command.split(), {"a": "-f,--foo:number[]"}, OPTIONS)
    assert result.options == {"a": [1, 2]}


def test_duplicate_aliases_fail_before_arguments():
    with pytest.raises(SettingsError):
        parse(["--unknown"], {"a": "--a:boolean", "b": "--a:string"}, OPTIONS)


def test_settings_errors_ignore_exit_policy():
    with pytest.raises(SettingsError):
        parse([], {"a": "--a:nope"})


def test_idempotence():
    definitions = {
        "ids": "-i,--id:number[]=[1]",
        "name": "--name:string",
        "verbose": "-v,--verbose:boolean",
    }
    tokens = ["-i", "2", "--name", "x", "-v", "target", "--", "r"]
    first = parse(tokens, definitions, OPTIONS)
    second = parse(tokens, definitions, OPTIONS)
    assert first == second


def test_mutating_a_result_does_not_leak():
    definitions = {"ids": "--id:number[]=[1, 2]"}
    first = parse([], definitions, OPTIONS)
    first.options["ids"].append(3)
    assert parse([], definitions, OPTIONS).options["ids"] == [1, 2]


def test_require_target_custom_message():
    config = ParseConfig(exit_on_process_error=False, require_target="need a path")
    with pytest.raises(ValidationError) as excinfo:
        parse([], {}, config)
    assert str(excinfo.value) == "need a path"
    assert parse(["p"], {}, config).targets == ["p"]


def test_help_flag_raises_help_signal():
    definitions = {
        "name": "--name:string!; Name",
        "help": "-h,--help:boolean; Show help",
    }
    config = ParseConfig(usage="prog [<options>]", exit_on_process_error=False)
    with pytest.raises(HelpSignal) as excinfo:
        parse(["-h"], definitions, config)
    assert excinfo.value.status == 0
    assert excinfo.value.text == format_help(
        "prog [<options>]", build_definition_set(definitions)
    )


def test_help_wins_over_other_errors():
    definitions = {"n": "--n:number", "help": "--help:boolean"}
    with pytest.raises(HelpSignal):
        parse(["--n", "abc", "--help", "--unknown"], definitions, OPTIONS)


def test_help_flag_with_value_is_an_error():
    with pytest.raises(ValidationError):
        parse(["--help=yes"], {"help": "--help:boolean"}, OPTIONS)


def test_help_flag_handling_can_be_disabled():
    config = ParseConfig(exit_on_process_error=False, handle_help_flag=False)
    result = parse(["--help"], {"help": "--help:boolean"}, config)
    assert result.options == {"help": True}


def test_non_boolean_help_key_is_an_ordinary_option():
    result = parse(["--help", "topic"], {"help": "--help:string"}, OPTIONS)
    assert result.options == {"help": "topic"}


def test_result_help_returns_text():
    definitions = {"port": "-p,--port:number=3000; Port to use"}
    result = parse([], definitions, ParseConfig(usage="serve", exit_on_process_error=False))
    expected = format_help("serve", build_definition_set(definitions))
    assert result.help() == expected
    assert str(result.help) == expected


def test_result_help_with_status_uses_the_sink():
    result = parse([], {"a": "--a:boolean"}, OPTIONS)
    with pytest.raises(HelpSignal) as excinfo:
        result.help(2)
    assert excinfo.value.status == 2
    assert "--a" in excinfo.value.text
