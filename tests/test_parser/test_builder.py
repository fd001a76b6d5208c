import pytest

from argloom.exceptions import ArgumentDefinitionError
from argloom.parser import ArgumentParser, Fixed, OneOrMore, VariableUpTo


def test_str():
    """Test the string representation of ArgumentParser."""
    parser = ArgumentParser("prog")
    assert str(parser) == "ArgumentParser(args=1, names=2, positional=0, required=0)"

    parser.add_argument("name")
    assert str(parser) == "ArgumentParser(args=2, names=2, positional=1, required=1)"

    parser.add_argument("count").add_name("-c").add_name("--count")
    assert str(parser) == "ArgumentParser(args=3, names=4, positional=1, required=1)"
    assert repr(parser) == str(parser)


def test_new_argument_is_required_positional():
    parser = ArgumentParser("prog")
    definition = parser.add_argument("name", "Who to greet").definition
    assert definition.is_positional
    assert not definition.is_optional
    assert definition.arity == Fixed(1)
    assert definition.description == "Who to greet"


def test_option_name_makes_argument_named_and_optional():
    parser = ArgumentParser("prog")
    handle = parser.add_argument("count").add_name("-c").add_name("--count")
    definition = handle.definition
    assert definition.is_named
    assert not definition.is_positional
    assert definition.is_optional
    assert definition.names == ["-c", "--count"]


def test_plain_name_after_option_name_fails():
    parser = ArgumentParser("prog")
    handle = parser.add_argument("count").add_name("--count")
    with pytest.raises(ArgumentDefinitionError, match="must start with"):
        handle.add_name("count")


def test_option_name_after_plain_name_fails():
    parser = ArgumentParser("prog")
    handle = parser.add_argument("count").add_name("count")
    with pytest.raises(ArgumentDefinitionError, match="existing name \"count\" isn't valid"):
        handle.add_name("--count")


@pytest.mark.parametrize("name", ["-", "--", "-abc", "---long"])
def test_invalid_option_name_fails(name):
    parser = ArgumentParser("prog")
    with pytest.raises(ArgumentDefinitionError):
        parser.add_argument("bad").add_name(name)


def test_non_string_name_fails():
    parser = ArgumentParser("prog")
    with pytest.raises(ArgumentDefinitionError):
        parser.add_argument("bad").add_name(5)


def test_handle_survives_later_definitions():
    parser = ArgumentParser("prog")
    handle = parser.add_argument("first")
    for index in range(100):
        parser.add_argument(f"arg_{index}")
    handle.set_description("still here").up_to(3)
    definition = parser.get_argument("first")
    assert definition.description == "still here"
    assert definition.arity == VariableUpTo(3)
    assert handle.key == 1


def test_set_nargs():
    parser = ArgumentParser("prog")
    handle = parser.add_argument("files")
    assert handle.set_nargs(2).definition.arity == Fixed(2)
    assert handle.set_nargs(-3).definition.arity == VariableUpTo(3)
    assert handle.set_nargs(0, at_least_one=True).definition.arity == OneOrMore(1)
    assert handle.set_nargs(2, at_least_one=True).definition.arity == OneOrMore(2)

    with pytest.raises(ArgumentDefinitionError):
        handle.set_nargs(300)


def test_set_arity_rejects_non_arity():
    parser = ArgumentParser("prog")
    with pytest.raises(ArgumentDefinitionError):
        parser.add_argument("files").set_arity(2)


def test_positional_optionality_follows_arity():
    parser = ArgumentParser("prog")
    handle = parser.add_argument("files")
    assert not handle.definition.is_optional
    handle.up_to(2)
    assert handle.definition.is_optional
    handle.one_or_more()
    assert not handle.definition.is_optional
    handle.fixed(0)
    assert handle.definition.is_optional


def test_explicit_optional_survives_arity_change():
    parser = ArgumentParser("prog")
    handle = parser.add_argument("target").set_optional()
    handle.fixed(1)
    assert handle.definition.is_optional


def test_duplicate_label_fails():
    parser = ArgumentParser("prog")
    parser.add_argument("name")
    with pytest.raises(ArgumentDefinitionError, match="already used"):
        parser.add_argument("name")

    handle = parser.add_argument("other")
    with pytest.raises(ArgumentDefinitionError, match="already used"):
        handle.set_label("name")
    handle.set_label("renamed")
    assert parser.get_argument("renamed") is not None


def test_help_is_predefined():
    parser = ArgumentParser("prog")
    definition = parser.get_argument("help")
    assert definition is not None
    assert definition.names == ["-h", "--help"]
    assert definition.arity == Fixed(0)
    assert definition.is_optional


def test_resolve_metalabels():
    parser = ArgumentParser("prog")
    parser.add_argument()
    parser.add_argument("name")
    parser.add_argument().up_to(1)
    parser.add_argument("count").add_name("-c").add_name("--count")
    parser.add_argument("target").set_metalabel("TARGET").set_optional()

    parser.resolve_metalabels()
    metalabels = [definition.metalabel for definition in parser.arguments]
    assert metalabels == ["-h|--help", "arg0", "name", "arg2", "-c|--count", "TARGET"]

    parser.resolve_metalabels()
    assert [definition.metalabel for definition in parser.arguments] == metalabels


def test_to_definition_list():
    parser = ArgumentParser("prog")
    parser.add_argument("count", "How many").add_name("--count").fixed(2)
    definitions = parser.to_definition_list()
    assert definitions[1] == {
        "label": "count",
        "names": ["--count"],
        "metalabel": "",
        "description": "How many",
        "optional": True,
        "positional": False,
        "arity": "Fixed(2)",
    }
