import pytest

from graphql import GraphQLList, GraphQLNonNull

from graphql_crud import (
    DeleteMutationField,
    GraphQLCrudBuildError,
    TypeRegistry,
    UpsertMutationField,
)


SDL = """
    type Person {
        id: ID!
        name: String!
        aliases: [String]
        books: [Book]
        shelves: [[Book]]
        scores: [[Int!]]
    }

    type Book {
        id: ID!
        title: String
        author: Person
    }

    type Query {
        version: String
    }
"""


class TestDeleteMutationField:

    def test_payload_type(self):
        registry = TypeRegistry.from_sdl(SDL)
        mutation_field = DeleteMutationField()

        payload = mutation_field.create_graphql_payload_type(
            "Book", registry.object_types
        )

        assert payload.name == "DeleteBookPayload"
        assert set(payload.fields) == {"book", "deletedId"}
        assert payload.fields["book"].type is registry.object_types["Book"]

    def test_payload_type_is_cached(self):
        registry = TypeRegistry.from_sdl(SDL)
        mutation_field = DeleteMutationField()

        payload = mutation_field.create_graphql_payload_type(
            "Book", registry.object_types
        )

        assert payload is mutation_field.create_graphql_payload_type(
            "Book", registry.object_types
        )

    def test_payload_type_from_registry(self):
        registry = TypeRegistry.from_sdl(SDL)
        payload = DeleteMutationField().create_graphql_payload_type(
            "Book", registry.object_types
        )
        registry.add(payload)

        assert payload is DeleteMutationField().create_graphql_payload_type(
            "Book", registry.object_types
        )

    def test_input_type(self):
        args = DeleteMutationField().create_graphql_input_type("Book")

        assert set(args) == {"id"}
        assert isinstance(args["id"].type, GraphQLNonNull)

    def test_unknown_type(self):
        registry = TypeRegistry.from_sdl(SDL)

        with pytest.raises(GraphQLCrudBuildError):
            DeleteMutationField().create_graphql_payload_type(
                "Magazine", registry.object_types
            )


class TestUpsertMutationField:

    def test_payload_type(self):
        registry = TypeRegistry.from_sdl(SDL)

        payload = UpsertMutationField().create_graphql_payload_type(
            "Person", registry.object_types
        )

        assert payload.name == "UpsertPersonPayload"
        assert set(payload.fields) == {"person"}

    def test_input_type(self):
        registry = TypeRegistry.from_sdl(SDL)

        input_type = UpsertMutationField().create_graphql_input_type(
            "Person", registry.object_types
        )

        assert input_type.name == "UpsertPersonInput"
        assert set(input_type.fields) == {"id", "name", "aliases", "books", "scores"}

        # Every input field is optional so objects can be partially updated
        assert str(input_type.fields["id"].type) == "ID"
        assert str(input_type.fields["name"].type) == "String"
        assert str(input_type.fields["aliases"].type) == "[String]"
        assert str(input_type.fields["books"].type) == "[ID]"
        assert isinstance(input_type.fields["books"].type, GraphQLList)

    def test_nested_lists(self):
        registry = TypeRegistry.from_sdl(SDL)

        input_type = UpsertMutationField().create_graphql_input_type(
            "Person", registry.object_types
        )

        assert str(input_type.fields["scores"].type) == "[[Int]]"
        assert "shelves" not in input_type.fields

    def test_object_reference_is_id(self):
        registry = TypeRegistry.from_sdl(SDL)

        input_type = UpsertMutationField().create_graphql_input_type(
            "Book", registry.object_types
        )

        assert str(input_type.fields["author"].type) == "ID"

    def test_input_type_is_cached(self):
        registry = TypeRegistry.from_sdl(SDL)
        mutation_field = UpsertMutationField()

        assert mutation_field.create_graphql_input_type(
            "Book", registry.object_types
        ) is mutation_field.create_graphql_input_type("Book", registry.object_types)
