"""First pass: register every class and attach member records to them."""

import logging
from typing import Any

from yuidoc_to_dts.class_member import MEMBER_ITEM_TYPES, Member
from yuidoc_to_dts.diagnostics import DEPRECATED_MEMBER, UNKNOWN_CLASS
from yuidoc_to_dts.generation_context import GenerationContext
from yuidoc_to_dts.klass import Klass

logger = logging.getLogger(__name__)


def is_ignored(name: str, ignore_prefixes: list[str]) -> bool:
    """Check whether ``name`` equals or sits under an ignored prefix."""
    return any(name == p or name.startswith(f"{p}.") for p in ignore_prefixes)


def attach_item(item: dict[str, Any], context: GenerationContext) -> Member | None:
    """Turn one classitem record into a member of its owning class."""
    ignore_prefixes = context.config.get("ignore_prefixes") or []
    class_name = item.get("class")
    if not class_name:
        logger.debug("Skipping item without a class; name=%s", item.get("name"))
        return None
    if is_ignored(class_name, ignore_prefixes):
        return None

    klass = context.registry.lookup(class_name)
    if klass is None:
        context.diagnostics.warn(
            UNKNOWN_CLASS, f"Klass not found for {class_name}", subject=class_name
        )
        return None

    # Items without a name, or of other kinds, are not declarations.
    if not item.get("name") or item.get("itemtype") not in MEMBER_ITEM_TYPES:
        return None

    member = Member(item, klass, context)
    if not klass.add_member(member, context.diagnostics):
        return None

    if klass.deprecated and not member.deprecated:
        context.diagnostics.warn(
            DEPRECATED_MEMBER,
            f"Parent deprecated but item isn't; parent={klass.full_name}, "
            f"method={member.name}",
            subject=klass.full_name,
        )
    return member


def build_model(document: dict[str, Any], context: GenerationContext) -> list[Klass]:
    """Register classes, attach items, then add the ambient extra classes.

    Everything happens in input order; the returned list is the registration
    order that the resolution pass walks.
    """
    ignore_prefixes = context.config.get("ignore_prefixes") or []

    for full_name, record in (document.get("classes") or {}).items():
        if is_ignored(full_name, ignore_prefixes):
            continue
        context.registry.register(full_name, record or {})

    attached = 0
    for item in document.get("classitems") or []:
        if attach_item(item, context) is not None:
            attached += 1

    # Well-known types that are referenced but never documented.
    for klass_name in context.config.get("additional_classes") or []:
        context.registry.register(klass_name, {"name": klass_name})

    logger.info(
        "Registered %d classes and %d members",
        len(context.registry.classes),
        attached,
    )
    return list(context.registry.classes)
