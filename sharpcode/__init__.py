"""SharpCode: fluent generation of C# source code.

Declarations are described with builders, finalised into immutable IR values
and rendered through Jinja2 templates::

    from sharpcode import code

    user = (
        code.create_class("User")
        .with_field(code.create_field("int", "_id"))
        .with_constructor(code.create_constructor().with_parameter("int", "id", "_id"))
        .with_property(code.create_property("int", "Id").with_getter("_id"))
    )
    print(user.to_source_code())
"""

from sharpcode import code
from sharpcode.builders import (
    ClassBuilder,
    ConstructorBuilder,
    EnumBuilder,
    EnumMemberBuilder,
    FieldBuilder,
    InterfaceBuilder,
    NamespaceBuilder,
    PropertyBuilder,
    StructBuilder,
    ignore_case,
    ordinal,
)
from sharpcode.config import Config
from sharpcode.errors import (
    InvalidArgumentError,
    InvalidSyntaxError,
    MissingBuilderSettingError,
    SharpCodeError,
)
from sharpcode.model import AccessModifier, MemberType
from sharpcode.renderer import TemplateRenderer, to_source_code

__version__ = "0.1.0"

__all__ = [
    "AccessModifier",
    "ClassBuilder",
    "Config",
    "ConstructorBuilder",
    "EnumBuilder",
    "EnumMemberBuilder",
    "FieldBuilder",
    "InterfaceBuilder",
    "InvalidArgumentError",
    "InvalidSyntaxError",
    "MemberType",
    "MissingBuilderSettingError",
    "NamespaceBuilder",
    "PropertyBuilder",
    "SharpCodeError",
    "StructBuilder",
    "TemplateRenderer",
    "code",
    "ignore_case",
    "ordinal",
    "to_source_code",
]
