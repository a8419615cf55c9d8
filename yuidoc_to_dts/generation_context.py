"""Per-run state shared by the registration, resolution and rendering passes."""

from dataclasses import dataclass
from typing import Any

from yuidoc_to_dts.class_registry import ClassRegistry
from yuidoc_to_dts.diagnostics import Diagnostics
from yuidoc_to_dts.load_config import load_config
from yuidoc_to_dts.namespace import NamespaceTree
from yuidoc_to_dts.relative_name import RelativeNamer
from yuidoc_to_dts.resolver import Resolver
from yuidoc_to_dts.type_converter import TypeConverter


@dataclass
class GenerationContext:
    """Everything one generation run owns; nothing is process-global."""

    config: dict[str, Any]
    diagnostics: Diagnostics
    tree: NamespaceTree
    registry: ClassRegistry
    namer: RelativeNamer
    converter: TypeConverter
    resolver: Resolver

    @classmethod
    def create(cls, config: dict[str, Any] | None = None) -> "GenerationContext":
        """Wire up a fresh context; ``config`` defaults to DEFAULT_CONFIG."""
        if config is None:
            config = load_config(None)
        diagnostics = Diagnostics()
        tree = NamespaceTree()
        registry = ClassRegistry(tree, config, diagnostics)
        namer = RelativeNamer(
            registry,
            config.get("relative_name_overrides") or {},
            config.get("built_in_types") or [],
        )
        converter = TypeConverter(config.get("type_aliases") or {}, namer, diagnostics)
        resolver = Resolver(tree, registry, diagnostics)
        return cls(
            config=config,
            diagnostics=diagnostics,
            tree=tree,
            registry=registry,
            namer=namer,
            converter=converter,
            resolver=resolver,
        )
