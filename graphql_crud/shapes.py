import enum

from typing import NamedTuple, Optional

from graphql import (
    GraphQLNamedType,
    GraphQLType,
    is_abstract_type,
    is_leaf_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
)


class FieldShape(enum.Enum):
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    ABSTRACT = "ABSTRACT"
    LIST = "LIST"


class FieldType(NamedTuple):
    """
    The shape of a field type once non-null wrappers are looked through.

    For `LIST` fields `item_shape` is the shape of the innermost item type,
    `named_type` is that item's named type and `depth` counts the nested
    list wrappers.
    """

    shape: FieldShape
    named_type: GraphQLNamedType
    required: bool = False
    item_shape: Optional[FieldShape] = None
    depth: int = 0

    @property
    def resolved_type_name(self) -> str:
        return self.named_type.name

    @property
    def is_composite_list(self) -> bool:
        # Only single level lists hold plain references
        return self.depth == 1 and self.item_shape in (
            FieldShape.OBJECT,
            FieldShape.ABSTRACT,
        )


def _unwrap_non_null(type_: GraphQLType):
    required = False
    while is_non_null_type(type_):
        required = True
        type_ = type_.of_type
    return type_, required


def _named_shape(type_: GraphQLType) -> FieldShape:
    if is_object_type(type_):
        return FieldShape.OBJECT
    if is_abstract_type(type_):
        return FieldShape.ABSTRACT
    if is_leaf_type(type_):
        return FieldShape.SCALAR
    raise TypeError(f"Unable to classify GraphQL type {type_}")


def inspect_field_type(type_: GraphQLType) -> FieldType:
    type_, required = _unwrap_non_null(type_)

    if is_list_type(type_):
        item = type_
        depth = 0
        while is_list_type(item):
            item, _ = _unwrap_non_null(item.of_type)
            depth += 1
        return FieldType(
            shape=FieldShape.LIST,
            named_type=item,
            required=required,
            item_shape=_named_shape(item),
            depth=depth,
        )

    return FieldType(shape=_named_shape(type_), named_type=type_, required=required)
