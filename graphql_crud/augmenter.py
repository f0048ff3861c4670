import logging

from typing import Callable, Dict, Mapping, Optional, Tuple

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLID,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
)

from graphql_crud.config import AugmentOptions
from graphql_crud.delegate import ResolverDelegate
from graphql_crud.error import GraphQLCrudBuildError
from graphql_crud.memory import MemoryResolver
from graphql_crud.mutations import DeleteMutationField, UpsertMutationField
from graphql_crud.registry import TypeRegistry
from graphql_crud.shapes import FieldShape, inspect_field_type
from graphql_crud.utils import lower_case_first_letter

logger = logging.getLogger(__name__)


class FieldOverride:
    """
    The attributes an augmentation sets on an existing field.
    """

    def __init__(
        self,
        resolve: Callable,
        description: Optional[str] = None,
        args: Optional[Dict[str, GraphQLArgument]] = None,
    ):
        self.resolve = resolve
        self.description = description
        self.args = args

    def apply(self, field: GraphQLField):
        field.resolve = self.resolve
        if self.description is not None:
            field.description = self.description
        if self.args is not None:
            field.args = self.args


class SchemaAugmentation:
    """
    Everything generated for one registry, ready to be merged into it.

    Building an augmentation leaves the registry untouched, `apply` is the
    only step that changes it.
    """

    def __init__(
        self,
        name: str,
        options: AugmentOptions,
        delegate: ResolverDelegate,
    ):
        self.name = name
        self.options = options
        self.delegate = delegate
        self.query_fields: Dict[str, GraphQLField] = {}
        self.mutation_fields: Dict[str, GraphQLField] = {}
        self.field_overrides: Dict[Tuple[str, str], FieldOverride] = {}
        self.type_resolvers: Dict[str, Callable] = {}
        self.new_types: Dict[str, GraphQLNamedType] = {}

    def apply(self, registry: TypeRegistry) -> TypeRegistry:
        object_types = registry.object_types
        query_name = self.options.query_type_name
        mutation_name = self.options.mutation_type_name

        for interface_name, resolve_type in self.type_resolvers.items():
            registry.interface_types[interface_name].resolve_type = resolve_type

        for (type_name, field_name), override in self.field_overrides.items():
            override.apply(object_types[type_name].fields[field_name])

        for type_ in self.new_types.values():
            registry.add(type_)

        object_types[query_name].fields.update(self.query_fields)

        if self.mutation_fields:
            if mutation_name not in object_types:
                registry.add(GraphQLObjectType(mutation_name, fields={}))
            object_types[mutation_name].fields.update(self.mutation_fields)

        logger.info(
            "Augmented schema '%s': %d query fields, %d mutation fields, "
            "%d field resolvers, %d interface resolvers",
            self.name,
            len(self.query_fields),
            len(self.mutation_fields),
            len(self.field_overrides),
            len(self.type_resolvers),
        )

        return registry


def discriminator_resolver(discriminator: str) -> Callable:
    def resolve_type(value, info, abstract_type) -> Optional[str]:
        if isinstance(value, Mapping):
            return value.get(discriminator)
        return getattr(value, discriminator, None)

    return resolve_type


def delegate_resolver(operation: Callable, resolved_type_name: str) -> Callable:
    """
    Adapts a delegate operation to a graphql-core field resolver.
    """

    def resolve(parent, info, **args):
        return operation(parent, args, info.context, info, resolved_type_name)

    return resolve


class SchemaAugmenter:
    """
    Derives the query and mutation surface of a registry from its types.

    Every domain object type gets root query fields, resolvers for its
    nested object and list fields and, unless pagination is enabled, an
    upsert and a delete mutation. Every domain interface type resolves to
    the type named by the discriminator of its data objects.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        delegate: ResolverDelegate,
        options: Optional[AugmentOptions] = None,
        name: str = "",
    ):
        self.registry = registry
        self.delegate = delegate
        self.options = options or AugmentOptions()
        self.name = name
        self.delete_mutation_field = DeleteMutationField()
        self.upsert_mutation_field = UpsertMutationField()
        self.augmentation: Optional[SchemaAugmentation] = None

    @property
    def object_types(self) -> Dict[str, GraphQLObjectType]:
        return self.registry.object_types

    def build(self) -> SchemaAugmentation:
        if self.options.query_type_name not in self.object_types:
            raise GraphQLCrudBuildError(
                f"Schema '{self.name}' has no root query type "
                f"'{self.options.query_type_name}'."
            )

        self.augmentation = SchemaAugmentation(
            name=self.name, options=self.options, delegate=self.delegate
        )

        for interface_name in self.registry.domain_interface_names(self.options):
            self.create_interface_resolver_for(interface_name)

        for type_name in self.registry.domain_object_names(self.options):
            self.create_root_query_fields(type_name)
            self.create_complex_resolver_for(type_name)
            self.create_list_resolver_for(type_name)

            if not self.options.pagination_enabled:
                self.create_upsert_mutation_for(type_name)
                self.create_delete_mutation_for(type_name)

        augmentation, self.augmentation = self.augmentation, None
        return augmentation

    def check_supported(self, type_name: str, field: str):
        if not self.delegate.supports(type_name):
            raise GraphQLCrudBuildError(
                f"{self.delegate.__class__.__name__} cannot resolve type "
                f"'{type_name}' required by '{field}'."
            )

    def create_interface_resolver_for(self, interface_name: str):
        self.augmentation.type_resolvers[interface_name] = discriminator_resolver(
            self.options.discriminator
        )

    def create_root_query_fields(self, type_name: str):
        object_type = self.object_types[type_name]
        resolved_type_name = inspect_field_type(object_type).resolved_type_name
        field_name = lower_case_first_letter(type_name)
        list_field_name = f"all{type_name}s"

        self.check_supported(
            resolved_type_name, f"{self.options.query_type_name}.{field_name}"
        )

        resolve = delegate_resolver(
            self.delegate.resolve_list_or_single, resolved_type_name
        )

        self.augmentation.query_fields[list_field_name] = GraphQLField(
            GraphQLList(object_type),
            resolve=resolve,
            description=f"Load every {type_name}.",
        )
        self.augmentation.query_fields[field_name] = GraphQLField(
            object_type,
            args={"id": GraphQLArgument(GraphQLNonNull(GraphQLID))},
            resolve=resolve,
            description=f"Load the {type_name} with the given id.",
        )
        logger.debug("Added query fields '%s' and '%s'", field_name, list_field_name)

    def create_complex_resolver_for(self, type_name: str):
        for field_name, field in self.object_types[type_name].fields.items():
            field_type = inspect_field_type(field.type)

            if field_type.shape is not FieldShape.OBJECT:
                continue

            resolved_type_name = field_type.resolved_type_name
            self.check_supported(resolved_type_name, f"{type_name}.{field_name}")

            self.augmentation.field_overrides[(type_name, field_name)] = FieldOverride(
                resolve=delegate_resolver(
                    self.delegate.resolve_by_parent_id, resolved_type_name
                ),
                description=f"Load object of type {resolved_type_name}",
            )
            logger.debug(
                "Resolving '%s.%s' by parent id as %s",
                type_name,
                field_name,
                resolved_type_name,
            )

    def create_list_resolver_for(self, type_name: str):
        for field_name, field in self.object_types[type_name].fields.items():
            field_type = inspect_field_type(field.type)

            if not field_type.is_composite_list:
                continue

            resolved_type_name = field_type.resolved_type_name
            self.check_supported(resolved_type_name, f"{type_name}.{field_name}")

            self.augmentation.field_overrides[(type_name, field_name)] = FieldOverride(
                resolve=delegate_resolver(
                    self.delegate.resolve_list_or_single, resolved_type_name
                ),
                description=f"Load list of type {resolved_type_name}",
                args={**field.args, "id": GraphQLArgument(GraphQLID)},
            )
            logger.debug(
                "Resolving '%s.%s' as list of %s",
                type_name,
                field_name,
                resolved_type_name,
            )

    def _add_payload_type(self, payload_type: GraphQLObjectType):
        if payload_type.name not in self.object_types:
            self.augmentation.new_types[payload_type.name] = payload_type

    def create_delete_mutation_for(self, type_name: str):
        field_name = f"delete{type_name}"
        resolved_type_name = inspect_field_type(
            self.object_types[type_name]
        ).resolved_type_name

        payload_type = self.delete_mutation_field.create_graphql_payload_type(
            type_name, self.object_types
        )
        self._add_payload_type(payload_type)

        self.augmentation.mutation_fields[field_name] = GraphQLField(
            payload_type,
            args=self.delete_mutation_field.create_graphql_input_type(type_name),
            resolve=delegate_resolver(self.delegate.resolve_delete, resolved_type_name),
            description=f"Delete the {type_name} with the given id and "
            f"return the {type_name} that was deleted.",
        )
        logger.debug("Added mutation field '%s'", field_name)

    def create_upsert_mutation_for(self, type_name: str):
        field_name = f"upsert{type_name}"
        resolved_type_name = inspect_field_type(
            self.object_types[type_name]
        ).resolved_type_name

        payload_type = self.upsert_mutation_field.create_graphql_payload_type(
            type_name, self.object_types
        )
        self._add_payload_type(payload_type)

        input_type = self.upsert_mutation_field.create_graphql_input_type(
            type_name, self.object_types
        )

        self.augmentation.mutation_fields[field_name] = GraphQLField(
            payload_type,
            args={"input": GraphQLArgument(input_type)},
            resolve=delegate_resolver(self.delegate.resolve_upsert, resolved_type_name),
            description=f"Create or update a {type_name} and "
            f"return the {type_name} that was stored.",
        )
        logger.debug("Added mutation field '%s'", field_name)


def generate(
    name: str,
    types: TypeRegistry,
    pagination_enabled: bool = False,
    delegate: Optional[ResolverDelegate] = None,
    options: Optional[AugmentOptions] = None,
) -> SchemaAugmentation:
    """
    Augments `types` in place with the generated queries, mutations and
    resolvers.

    The registry should be generated once per schema build, a second call
    replaces the fields added by the first. Without a `delegate` the data
    is kept in a new `MemoryResolver`.

    :param name: Name of the schema, used in log messages only.
    :param types: The registry to augment.
    :param pagination_enabled: When True no mutations are generated.
    :param delegate: Performs the data access of the generated fields.
    :param options: Naming conventions, `pagination_enabled` overrides
        the value they hold.
    :return: The augmentation that was applied.
    """
    options = (options or AugmentOptions()).model_copy(
        update={"pagination_enabled": pagination_enabled}
    )

    if delegate is None:
        delegate = MemoryResolver(discriminator=options.discriminator)

    augmentation = SchemaAugmenter(
        registry=types, delegate=delegate, options=options, name=name
    ).build()

    augmentation.apply(types)
    return augmentation
