from typing import Dict, Iterable, List, Optional, Union

from graphql import (
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    build_schema,
    is_interface_type,
    is_introspection_type,
    is_object_type,
)

from graphql_crud.config import AugmentOptions


class TypeRegistry:
    """
    The interface and object types a schema is assembled from, keyed by
    type name.

    The mappings are shared by reference: applying an augmentation updates
    the `GraphQLObjectType` and `GraphQLInterfaceType` instances held here.
    """

    def __init__(
        self,
        interface_types: Optional[Dict[str, GraphQLInterfaceType]] = None,
        object_types: Optional[Dict[str, GraphQLObjectType]] = None,
        types: Optional[Iterable[GraphQLNamedType]] = None,
    ):
        self.interface_types = interface_types if interface_types is not None else {}
        self.object_types = object_types if object_types is not None else {}
        # Named types that are neither interfaces nor objects (enums, unions...)
        self.types = {t.name: t for t in (types or [])}

    @classmethod
    def from_types(cls, types: Iterable[GraphQLNamedType]) -> "TypeRegistry":
        registry = cls()
        for type_ in types:
            registry.add(type_)
        return registry

    @classmethod
    def from_schema(cls, schema: GraphQLSchema) -> "TypeRegistry":
        return cls.from_types(
            type_
            for type_ in schema.type_map.values()
            if not is_introspection_type(type_)
        )

    @classmethod
    def from_sdl(cls, sdl: str) -> "TypeRegistry":
        # Root operation types are not required in the document
        return cls.from_schema(build_schema(sdl, assume_valid_sdl=True))

    def add(self, type_: GraphQLNamedType) -> GraphQLNamedType:
        if is_object_type(type_):
            self.object_types[type_.name] = type_
        elif is_interface_type(type_):
            self.interface_types[type_.name] = type_
        else:
            self.types[type_.name] = type_
        return type_

    def domain_object_names(self, options: AugmentOptions) -> List[str]:
        return [
            type_.name
            for type_ in self.object_types.values()
            if options.is_domain_object_name(type_.name)
        ]

    def domain_interface_names(self, options: AugmentOptions) -> List[str]:
        return [
            type_.name
            for type_ in self.interface_types.values()
            if options.is_domain_interface_name(type_.name)
        ]

    def all_types(self) -> List[GraphQLNamedType]:
        return [
            *self.interface_types.values(),
            *self.object_types.values(),
            *self.types.values(),
        ]

    def to_schema(
        self, options: Optional[AugmentOptions] = None, **kwargs
    ) -> GraphQLSchema:
        if options is None:
            options = AugmentOptions()

        query = self.object_types.get(options.query_type_name)
        mutation = self.object_types.get(options.mutation_type_name)
        subscription = self.object_types.get(options.subscription_type_name)

        roots = [query, mutation, subscription]

        # An empty root type cannot be part of a valid schema
        if mutation is not None and not mutation.fields:
            mutation = None

        return GraphQLSchema(
            query=query,
            mutation=mutation,
            subscription=subscription,
            types=[type_ for type_ in self.all_types() if type_ not in roots],
            **kwargs
        )

    def __contains__(self, name: Union[str, GraphQLNamedType]) -> bool:
        if not isinstance(name, str):
            name = name.name
        return (
            name in self.object_types
            or name in self.interface_types
            or name in self.types
        )
