"""Builder for namespaces, the outermost unit of generated source."""

from __future__ import annotations

from sharpcode.builders.base import SourceBuilder, is_blank, require, require_all
from sharpcode.builders.class_builder import ClassBuilder
from sharpcode.builders.enum_builder import EnumBuilder
from sharpcode.builders.interface_builder import InterfaceBuilder
from sharpcode.builders.struct_builder import StructBuilder
from sharpcode.errors import MissingBuilderSettingError
from sharpcode.model import Namespace


class NamespaceBuilder(SourceBuilder):
    """Provides functionality for building namespaces.

    Using directives are emitted above the namespace in the order they were
    added.  Nested declarations are grouped by kind: enums, interfaces,
    classes, then structs.
    """

    def __init__(self, namespace: Namespace | None = None) -> None:
        self.namespace = namespace or Namespace()
        self.classes: list[ClassBuilder] = []
        self.structs: list[StructBuilder] = []
        self.interfaces: list[InterfaceBuilder] = []
        self.enums: list[EnumBuilder] = []

    def with_name(self, name: str) -> NamespaceBuilder:
        self.namespace = self.namespace.with_(name=require(name, "name"))
        return self

    def with_using(self, using: str) -> NamespaceBuilder:
        """Add a using directive, e.g. ``with_using("System.Linq")``."""
        require(using, "using")
        if using not in self.namespace.usings:
            self.namespace = self.namespace.with_(usings=(*self.namespace.usings, using))
        return self

    def with_usings(self, *usings: str) -> NamespaceBuilder:
        for using in require_all(usings, "usings"):
            self.with_using(using)
        return self

    def with_class(self, builder: ClassBuilder) -> NamespaceBuilder:
        self.classes.append(require(builder, "builder"))
        return self

    def with_classes(self, *builders: ClassBuilder) -> NamespaceBuilder:
        self.classes.extend(require_all(builders, "builders"))
        return self

    def with_struct(self, builder: StructBuilder) -> NamespaceBuilder:
        self.structs.append(require(builder, "builder"))
        return self

    def with_structs(self, *builders: StructBuilder) -> NamespaceBuilder:
        self.structs.extend(require_all(builders, "builders"))
        return self

    def with_interface(self, builder: InterfaceBuilder) -> NamespaceBuilder:
        self.interfaces.append(require(builder, "builder"))
        return self

    def with_interfaces(self, *builders: InterfaceBuilder) -> NamespaceBuilder:
        self.interfaces.extend(require_all(builders, "builders"))
        return self

    def with_enum(self, builder: EnumBuilder) -> NamespaceBuilder:
        self.enums.append(require(builder, "builder"))
        return self

    def with_enums(self, *builders: EnumBuilder) -> NamespaceBuilder:
        self.enums.extend(require_all(builders, "builders"))
        return self

    def build(self) -> Namespace:
        if is_blank(self.namespace.name):
            raise MissingBuilderSettingError("namespace", "name")
        return self.namespace.with_(
            classes=tuple(builder.build() for builder in self.classes),
            structs=tuple(builder.build() for builder in self.structs),
            interfaces=tuple(builder.build() for builder in self.interfaces),
            enums=tuple(builder.build() for builder in self.enums),
        )
