"""Rendering of the resolved model as nested TypeScript declarations."""

import re

from yuidoc_to_dts.class_member import Member, Param
from yuidoc_to_dts.doc_comment import (
    klass_doc_comment,
    member_doc_comment,
    prefix_lines,
)
from yuidoc_to_dts.generation_context import GenerationContext
from yuidoc_to_dts.klass import Klass
from yuidoc_to_dts.namespace import Namespace
from yuidoc_to_dts.relative_name import RelativeNamer
from yuidoc_to_dts.type_converter import split_union

IDENTIFIER_RE = re.compile(r"^[$A-Z_][0-9A-Z_$]*$", re.IGNORECASE)
INDENT = "  "


def member_name(name: str) -> str:
    """Quote names that are not plain identifiers, e.g. ``'@each'``."""
    if IDENTIFIER_RE.match(name):
        return name
    escaped = name.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def rest_element_type(type_text: str) -> str:
    # Only the first branch of a union survives as the element type.
    first = split_union(type_text)[0]
    return "any" if first == "{}" else first


def render_params(params: list[Param]) -> str:
    """Render a parameter list; ``?`` only where no required param follows."""
    rendered = []
    for i, param in enumerate(params):
        if param.is_rest:
            rendered.append(f"...{param.name}: {rest_element_type(param.type)}[]")
            continue
        following = params[i + 1 :]
        optional = param.optional and all(p.optional or p.is_rest for p in following)
        marker = "?" if optional else ""
        rendered.append(f"{param.name}{marker}: {param.type}")
    return ", ".join(rendered)


def build_declaration(member: Member, *, skip_rest: bool = False) -> str:
    """Build one signature for ``member``.

    Parameters after a rest parameter cannot be expressed, so the list is cut
    after it; with ``skip_rest`` it is cut before it instead.
    """
    klass = member.klass
    keyword = ""
    if klass.is_namespace and not klass.is_true_class:
        keyword = "function " if member.is_method else "var "
    elif member.is_static:
        keyword = "static "

    name = member_name(member.name)
    if not member.is_method:
        return f"{keyword}{name}: {member.type}"

    params = member.params
    rest = member.rest_index
    if rest is not None:
        params = params[:rest] if skip_rest else params[: rest + 1]

    signature = f"{keyword}{name}({render_params(params)})"
    if member.return_type:
        signature += f": {member.return_type}"
    return signature


def member_declarations(member: Member) -> list[str]:
    """All overloads for a member: one, or two when a rest param is not last."""
    declarations = [build_declaration(member)]
    rest = member.rest_index
    if rest is not None and rest != len(member.params) - 1:
        declarations.append(build_declaration(member, skip_rest=True))
    return declarations


def klass_declaration(klass: Klass, namer: RelativeNamer) -> str:
    """The ``class Foo<T> extends Bar implements Baz`` header (without brace)."""
    text = f"{klass.kind} {klass.name}"
    if klass.generics:
        text += f"<{klass.generics}>"
    if klass.extends is not None:
        parent = namer.relative_name(klass.extends.full_name, klass.full_name)
        text += f" extends {parent}"
    if klass.implements:
        refs = [
            ref.reference(namer.relative_name, klass.full_name)
            for ref in klass.implements
        ]
        text += f" implements {', '.join(refs)}"
    return text


def render_members(klass: Klass, prefix: str) -> list[str]:
    lines = []
    for member in klass.members.values():
        if member.private:
            continue
        doc = member_doc_comment(member)
        if doc:
            lines.extend(prefix_lines(doc, prefix))
        lines.extend(f"{prefix}{d};" for d in member_declarations(member))
    return lines


def render_klass(klass: Klass, prefix: str, namer: RelativeNamer) -> list[str]:
    lines = []
    doc = klass_doc_comment(klass)
    if doc:
        lines.extend(prefix_lines(doc, prefix))
    declare = "declare " if prefix == "" else ""
    lines.append(f"{prefix}{declare}{klass_declaration(klass, namer)} {{")
    lines.extend(render_members(klass, prefix + INDENT))
    lines.append(f"{prefix}}}")
    return lines


def _render_namespace(
    namespace: Namespace, prefix: str, namer: RelativeNamer, lines: list[str]
) -> None:
    child_prefix = "" if namespace.is_root else prefix + INDENT

    if not namespace.is_root:
        declare = "declare " if prefix == "" else ""
        lines.append(f"{prefix}{declare}namespace {namespace.name} {{")

        # A namespace documented as a class contributes its members directly.
        self_klass = namespace.parent.classes.get(namespace.name)
        if self_klass is not None and not self_klass.is_true_class:
            lines.extend(render_members(self_klass, child_prefix))

    for child in namespace.children.values():
        _render_namespace(child, child_prefix, namer, lines)

    for klass in namespace.classes.values():
        if klass.is_namespace and not klass.is_true_class:
            continue
        lines.extend(render_klass(klass, child_prefix, namer))

    if not namespace.is_root:
        lines.append(f"{prefix}}}")


def render_declarations(context: GenerationContext) -> str:
    """Render the whole declaration file for a resolved context."""
    lines: list[str] = []
    _render_namespace(context.tree.root, "", context.namer, lines)
    lines.append(f"export default {context.config.get('export_default', 'Ember')};")
    return "\n".join(lines) + "\n"
