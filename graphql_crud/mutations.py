from typing import Dict, Mapping

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLID,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
)

from graphql_crud.error import GraphQLCrudBuildError
from graphql_crud.shapes import FieldShape, inspect_field_type
from graphql_crud.utils import lower_case_first_letter


def payload_field_name(type_name: str) -> str:
    """
    The name of the payload field holding the mutated object.
    """
    return lower_case_first_letter(type_name)


def _get_object_type(
    type_name: str, object_types: Mapping[str, GraphQLObjectType]
) -> GraphQLObjectType:
    try:
        return object_types[type_name]
    except KeyError:
        raise GraphQLCrudBuildError(
            f"Unable to create a mutation for unknown type '{type_name}'."
        ) from None


class MutationField:
    """
    Creates the payload and input types of one kind of mutation.

    Created types are cached by name. A payload already present in the
    `object_types` it is given is reused instead of being created again.
    """

    prefix = ""

    def __init__(self):
        self.payload_types: Dict[str, GraphQLObjectType] = {}

    def payload_type_name(self, type_name: str) -> str:
        return f"{self.prefix}{type_name}Payload"

    def payload_fields(self, object_type: GraphQLObjectType) -> Dict[str, GraphQLField]:
        return {
            payload_field_name(object_type.name): GraphQLField(
                object_type,
                description=f"The {object_type.name} that was changed.",
            )
        }

    def create_graphql_payload_type(
        self, type_name: str, object_types: Mapping[str, GraphQLObjectType]
    ) -> GraphQLObjectType:
        name = self.payload_type_name(type_name)
        if name in object_types:
            return object_types[name]
        if name not in self.payload_types:
            object_type = _get_object_type(type_name, object_types)
            self.payload_types[name] = GraphQLObjectType(
                name,
                fields=lambda: self.payload_fields(object_type),
            )
        return self.payload_types[name]


class DeleteMutationField(MutationField):
    prefix = "Delete"

    def payload_fields(self, object_type: GraphQLObjectType) -> Dict[str, GraphQLField]:
        return {
            **super().payload_fields(object_type),
            "deletedId": GraphQLField(
                GraphQLID, description=f"The id of the deleted {object_type.name}."
            ),
        }

    def create_graphql_input_type(self, type_name: str) -> Dict[str, GraphQLArgument]:
        return {
            "id": GraphQLArgument(
                GraphQLNonNull(GraphQLID),
                description=f"The id of the {type_name} to delete.",
            )
        }


class UpsertMutationField(MutationField):
    prefix = "Upsert"

    def __init__(self):
        super().__init__()
        self.input_types: Dict[str, GraphQLInputObjectType] = {}

    def input_fields(self, object_type: GraphQLObjectType) -> Dict[str, GraphQLInputField]:
        fields = {}

        for name, field in object_type.fields.items():
            field_type = inspect_field_type(field.type)

            if field_type.shape is FieldShape.SCALAR:
                input_type = field_type.named_type
            elif field_type.shape is FieldShape.LIST:
                if field_type.item_shape is FieldShape.SCALAR:
                    input_type = field_type.named_type
                    for _ in range(field_type.depth):
                        input_type = GraphQLList(input_type)
                elif field_type.is_composite_list:
                    input_type = GraphQLList(GraphQLID)
                else:
                    # Nested lists of objects cannot be written as references
                    continue
            else:
                input_type = GraphQLID

            fields[name] = GraphQLInputField(input_type)

        return fields

    def create_graphql_input_type(
        self, type_name: str, object_types: Mapping[str, GraphQLObjectType]
    ) -> GraphQLInputObjectType:
        name = f"{self.prefix}{type_name}Input"
        if name not in self.input_types:
            object_type = _get_object_type(type_name, object_types)
            self.input_types[name] = GraphQLInputObjectType(
                name,
                fields=lambda: self.input_fields(object_type),
                description=f"Fields to create or update a {type_name} with.",
            )
        return self.input_types[name]
