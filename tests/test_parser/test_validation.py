import pytest

from argloom.exceptions import ArgumentDefinitionError
from argloom.parser import ArgumentParser


def test_required_positional_after_optional_fails():
    parser = ArgumentParser("prog")
    parser.add_argument("files").up_to(2)
    parser.add_argument("target")
    with pytest.raises(
        ArgumentDefinitionError,
        match='"target" must be optional as it follows an optional positional argument "files"',
    ):
        parser.parse_args_no_execute_filename([])


def test_optional_positionals_after_required_are_fine():
    parser = ArgumentParser("prog")
    parser.add_argument("source")
    parser.add_argument("extra").up_to(2)
    parser.add_argument("more").up_to(2)
    result = parser.parse_args_no_execute_filename(["a"])
    assert not result.error


def test_named_argument_must_be_optional():
    parser = ArgumentParser("prog")
    parser.add_argument("mode").add_name("--mode").set_optional(False)
    with pytest.raises(ArgumentDefinitionError, match='Named argument "--mode" must be optional'):
        parser.parse_args_no_execute_filename([])


def test_name_collision_fails():
    parser = ArgumentParser("prog")
    parser.add_argument("first").add_name("--x")
    parser.add_argument("second").add_name("-y").add_name("--x")
    with pytest.raises(ArgumentDefinitionError, match='Multiple arguments with the name "--x"'):
        parser.parse_args_no_execute_filename([])


def test_same_name_twice_on_one_argument_fails():
    parser = ArgumentParser("prog")
    parser.add_argument("first").add_name("--x").add_name("--x")
    with pytest.raises(ArgumentDefinitionError, match="--x"):
        parser.parse_args_no_execute_filename([])


@pytest.mark.parametrize("name", ["-h", "--help"])
def test_help_names_cannot_be_redefined(name):
    parser = ArgumentParser("prog")
    parser.add_argument("assist").add_name(name)
    with pytest.raises(ArgumentDefinitionError, match="Multiple arguments with the name"):
        parser.parse_args_no_execute_filename([])


def test_label_collision_through_definition_edit_fails():
    parser = ArgumentParser("prog")
    parser.add_argument("first")
    second = parser.add_argument("second")
    second.definition.label = "first"
    with pytest.raises(ArgumentDefinitionError, match='label "first"'):
        parser.parse_args_no_execute_filename([])


def test_validation_does_not_depend_on_tokens():
    parser = ArgumentParser("prog")
    parser.add_argument("files").up_to(2)
    parser.add_argument("target")
    with pytest.raises(ArgumentDefinitionError):
        parser.parse_args_no_execute_filename(["--help"])
