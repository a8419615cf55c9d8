"""Tests for rendering the resolved model as TypeScript declarations."""

from typing import Any

from yuidoc_to_dts.doc_comment import abbreviate_description, format_doc_comment
from yuidoc_to_dts.generation_context import GenerationContext
from yuidoc_to_dts.klass import Klass
from yuidoc_to_dts.load_config import load_config
from yuidoc_to_dts.render_declarations import (
    klass_declaration,
    member_declarations,
    member_name,
    render_params,
    rest_element_type,
)
from yuidoc_to_dts.run_generation import generate

EXPECTED_EMBER = """\
declare namespace Ember {
  function get(obj: {}, key: string): {};
  var VERSION: string;
  class Object extends CoreObject implements Observable {
    static create(...args: any[]): Object;
    set(key: string, value: any): any;
  }
  class CoreObject {
    static create(...args: any[]): CoreObject;
  }
  class Observable {
    set(key: string, value: any): any;
  }
}
export default Ember;
"""


def make_context(**overrides: Any) -> GenerationContext:
    """Create a context without the ambient extra classes."""
    config = load_config(None)
    config["additional_classes"] = []
    config.update(overrides)
    return GenerationContext.create(config)


def method(klass: str, name: str, **extra: Any) -> dict[str, Any]:
    return {"class": klass, "name": name, "itemtype": "method", **extra}


def render(
    classes: dict[str, dict[str, Any]],
    items: list[dict[str, Any]],
    **overrides: Any,
) -> str:
    document = {"classes": classes, "classitems": items}
    return generate(document, make_context(**overrides))


def test_full_document() -> None:
    """Verify namespaces, classes, mixins and statics render together."""
    classes = {
        "Ember": {"name": "Ember"},
        "Ember.Object": {
            "name": "Ember.Object",
            "extends": "Ember.CoreObject",
            "uses": ["Ember.Observable"],
        },
        "Ember.CoreObject": {"name": "Ember.CoreObject"},
        "Ember.Observable": {"name": "Ember.Observable"},
    }
    items = [
        method(
            "Ember",
            "get",
            params=[
                {"name": "obj", "type": "Object"},
                {"name": "key", "type": "String"},
            ],
            **{"return": {"type": "Object"}},
        ),
        {"class": "Ember", "name": "VERSION", "itemtype": "property", "type": "String"},
        method(
            "Ember.CoreObject",
            "create",
            static=True,
            params=[{"name": "arguments*", "type": "Object"}],
        ),
        method(
            "Ember.Observable",
            "set",
            params=[
                {"name": "key", "type": "String"},
                {"name": "value", "type": "*"},
            ],
        ),
    ]
    assert render(classes, items) == EXPECTED_EMBER


def test_empty_document_only_exports() -> None:
    """Verify an empty model still ends with the default export."""
    assert render({}, []) == "export default Ember;\n"
    assert render({}, [], export_default="Ext") == "export default Ext;\n"


def test_top_level_class_is_declared() -> None:
    """Verify classes in the root namespace get a declare keyword."""
    output = render({"DOMElement": {"name": "DOMElement"}}, [])
    assert output.startswith("declare class DOMElement {\n}\n")


def test_rsvp_promise_override() -> None:
    """Verify generics and literal implements from class overrides."""
    output = render(
        {
            "Ember": {"name": "Ember"},
            "Ember.RSVP.Promise": {"name": "Ember.RSVP.Promise"},
        },
        [],
    )
    assert "  namespace RSVP {\n" in output
    assert "    class Promise<T> implements Promise<T> {\n" in output


def test_aliased_namespace_lands_under_parent() -> None:
    """Verify legacy RSVP.* names are nested under Ember.RSVP."""
    output = render(
        {
            "Ember": {"name": "Ember"},
            "RSVP.EventTarget": {"name": "RSVP.EventTarget"},
        },
        [],
    )
    assert "declare namespace Ember {\n  namespace RSVP {\n" in output
    assert "    class EventTarget {\n" in output
    assert "declare namespace RSVP" not in output


def test_private_members_are_not_rendered() -> None:
    output = render(
        {"Ember.Foo": {"name": "Ember.Foo"}},
        [
            method("Ember.Foo", "visible"),
            method("Ember.Foo", "hidden", access="private"),
        ],
    )
    assert "visible(): any;" in output
    assert "hidden" not in output


def test_rest_param_in_middle_emits_two_overloads() -> None:
    """Verify [a, b*, c] yields a cut-after and a cut-before overload."""
    context = make_context()
    generate(
        {
            "classes": {"Ember.Foo": {"name": "Ember.Foo"}},
            "classitems": [
                method(
                    "Ember.Foo",
                    "send",
                    params=[
                        {"name": "a", "type": "String"},
                        {"name": "b*", "type": "Number|String"},
                        {"name": "c", "type": "Boolean"},
                    ],
                    **{"return": {}},
                )
            ],
        },
        context,
    )
    member = context.registry.lookup("Ember.Foo").members["send"]
    assert member_declarations(member) == [
        "send(a: string, ...b: number[]): void",
        "send(a: string): void",
    ]


def test_trailing_rest_param_has_single_overload() -> None:
    context = make_context()
    generate(
        {
            "classes": {"Ember.Foo": {"name": "Ember.Foo"}},
            "classitems": [
                method(
                    "Ember.Foo",
                    "log",
                    params=[{"name": "parts", "type": "String..."}],
                )
            ],
        },
        context,
    )
    member = context.registry.lookup("Ember.Foo").members["log"]
    assert member_declarations(member) == ["log(...parts: string[]): any"]


def test_optional_marker_only_when_no_required_follows() -> None:
    """Verify an optional param before a required one stays required."""
    context = make_context()
    generate(
        {
            "classes": {"Ember.Foo": {"name": "Ember.Foo"}},
            "classitems": [
                method(
                    "Ember.Foo",
                    "a",
                    params=[
                        {"name": "x", "optional": True},
                        {"name": "y"},
                        {"name": "z", "optional": True},
                    ],
                ),
                method(
                    "Ember.Foo",
                    "b",
                    params=[
                        {"name": "x", "optional": True},
                        {"name": "rest*"},
                    ],
                ),
            ],
        },
        context,
    )
    members = context.registry.lookup("Ember.Foo").members
    assert render_params(members["a"].params) == "x: any, y: any, z?: any"
    assert render_params(members["b"].params) == "x?: any, ...rest: any[]"


def test_rest_element_type() -> None:
    assert rest_element_type("string|number") == "string"
    assert rest_element_type("{}") == "any"
    assert rest_element_type("Array<string|number>") == "Array<string|number>"


def test_member_name_quoting() -> None:
    """Verify non-identifier names are quoted and escaped."""
    assert member_name("isDestroyed") == "isDestroyed"
    assert member_name("$el") == "$el"
    assert member_name("@each") == "'@each'"
    assert member_name("it's") == "'it\\'s'"


def test_quoted_property_renders() -> None:
    output = render(
        {"Ember.Foo": {"name": "Ember.Foo"}},
        [{"class": "Ember.Foo", "name": "[]", "itemtype": "property", "type": "Array"}],
    )
    assert "    '[]': any[];\n" in output


def test_built_in_class_renders_as_interface() -> None:
    klass = Klass("Function", "Function", {}, built_in_types=["Function"])
    context = make_context()
    assert klass_declaration(klass, context.namer) == "interface Function"


def test_doc_comments() -> None:
    """Verify descriptions and deprecation notices become doc comments."""
    output = render(
        {
            "Ember.Old": {
                "name": "Ember.Old",
                "description": "Old thing.\nStill here.\n\nMore detail.",
                "deprecated": True,
                "deprecationMessage": "Use New.",
            }
        },
        [method("Ember.Old", "run", description="Runs */ now.")],
    )
    expected = (
        "  /**\n"
        "   * DEPRECATED: Use New.\n"
        "   * Old thing.\n"
        "   * Still here.\n"
        "   */\n"
        "  class Old {\n"
        "    /**\n"
        "     * DEPRECATED: Use New.\n"
        "     * Runs *\\/ now.\n"
        "     */\n"
        "    run(): any;\n"
        "  }\n"
    )
    assert expected in output


def test_abbreviate_description() -> None:
    assert abbreviate_description("  One.\r\nTwo.\n\nThree.") == "One.\n * Two."
    assert format_doc_comment([]) is None
    assert format_doc_comment(["Hi"]) == "/**\n * Hi\n */"


def test_namespace_members_use_function_and_var() -> None:
    """Verify a namespace documented as a class renders free declarations."""
    output = render(
        {
            "Ember": {"name": "Ember"},
            "Ember.run": {"name": "Ember.run"},
            "Ember.run.Queue": {"name": "Ember.run.Queue"},
        },
        [
            method("Ember.run", "later", static=True),
            {"class": "Ember.run", "name": "queues", "itemtype": "property"},
        ],
    )
    assert (
        "  namespace run {\n"
        "    function later(): any;\n"
        "    var queues: any;\n"
        "    class Queue {\n"
        "    }\n"
        "  }\n"
    ) in output
    assert "class run" not in output
