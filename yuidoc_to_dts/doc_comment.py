"""Helpers for building JSDoc-style comments from documentation text."""

from yuidoc_to_dts.class_member import Member
from yuidoc_to_dts.klass import Klass


def abbreviate_description(text: str) -> str:
    """Keep the first paragraph, continuing each line as a comment line."""
    text = text.replace("\r\n", "\n").strip()
    first = text.split("\n\n")[0]
    lines = [line.strip() for line in first.split("\n")]
    return "\n * ".join(lines)


def format_doc_comment(lines: list[str]) -> str | None:
    """Wrap lines in ``/** ... */``; None when there is nothing to say."""
    if not lines:
        return None
    body = "\n".join(f" * {line}".rstrip() for line in lines)
    # A literal "*/" would close the comment early.
    body = body.replace("*/", "*\\/")
    return f"/**\n{body}\n */"


def klass_doc_comment(klass: Klass) -> str | None:
    lines = []
    if klass.deprecated:
        lines.append(f"DEPRECATED: {klass.deprecation_message}".rstrip())
    if klass.description:
        lines.append(abbreviate_description(klass.description))
    return format_doc_comment(lines)


def member_doc_comment(member: Member) -> str | None:
    """Doc comment for a member; members of a deprecated class inherit its notice."""
    lines = []
    if member.deprecated:
        lines.append(f"DEPRECATED: {member.deprecation_message}".rstrip())
    elif member.klass.deprecated:
        lines.append(f"DEPRECATED: {member.klass.deprecation_message}".rstrip())
    if member.description:
        lines.append(abbreviate_description(member.description))
    return format_doc_comment(lines)


def prefix_lines(text: str, prefix: str) -> list[str]:
    return [f"{prefix}{line}" for line in text.split("\n")]
