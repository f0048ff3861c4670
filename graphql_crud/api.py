from typing import Any, Callable, Dict, List, Optional

# noinspection PyPackageRequirements
from graphql import (
    ExecutionResult,
    GraphQLSchema,
    graphql,
    graphql_sync,
    validate_schema,
)

from graphql_crud.augmenter import SchemaAugmentation, SchemaAugmenter
from graphql_crud.config import AugmentOptions
from graphql_crud.delegate import ResolverDelegate
from graphql_crud.error import GraphQLCrudBuildError
from graphql_crud.memory import MemoryResolver
from graphql_crud.registry import TypeRegistry


class GraphQLCrudAPI:
    """
    Augments a type registry once and executes queries against the result.

    Example usage:
        api = GraphQLCrudAPI(TypeRegistry.from_sdl(sdl))
        api.execute('mutation { upsertBook(input: {title: "Emma"}) { book { id } } }')
    """

    def __init__(
        self,
        registry: TypeRegistry,
        delegate: Optional[ResolverDelegate] = None,
        options: Optional[AugmentOptions] = None,
        middleware: Optional[List[Callable]] = None,
        name: str = "",
    ):
        """
        :param registry: The types the schema is built from.
        :param delegate: Performs the data access, a `MemoryResolver`
            when not given.
        :param options: Naming conventions used by the augmenter.
        :param middleware: graphql-core middleware applied to every query.
        :param name: Name of the schema, used in log messages.
        """
        self.registry = registry
        self.options = options or AugmentOptions()
        self.delegate = delegate or MemoryResolver(
            discriminator=self.options.discriminator
        )
        self.middleware = middleware or []
        self.name = name
        self.augmentation: Optional[SchemaAugmentation] = None
        self._cached_schema: Optional[GraphQLSchema] = None

    def build_schema(self, ignore_cache: bool = False) -> GraphQLSchema:
        """
        Builds the augmented schema.

        The registry is augmented on the first build only, later builds
        reuse it.
        :param ignore_cache: If True, rebuild the schema from the registry.
        """
        if not ignore_cache and self._cached_schema:
            return self._cached_schema

        if self.augmentation is None:
            self.augmentation = SchemaAugmenter(
                registry=self.registry,
                delegate=self.delegate,
                options=self.options,
                name=self.name,
            ).build()
            self.augmentation.apply(self.registry)

        schema = self.registry.to_schema(self.options)

        errors = validate_schema(schema)
        if errors:
            raise GraphQLCrudBuildError(
                f"Schema '{self.name}' is invalid: "
                + "; ".join(error.message for error in errors)
            )

        self._cached_schema = schema
        return schema

    def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        operation_name: Optional[str] = None,
        root_value: Any = None,
        context: Any = None,
    ) -> ExecutionResult:
        return graphql_sync(
            self.build_schema(),
            query,
            root_value=root_value,
            context_value=context,
            variable_values=variables,
            operation_name=operation_name,
            middleware=self.middleware or None,
        )

    async def execute_async(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        operation_name: Optional[str] = None,
        root_value: Any = None,
        context: Any = None,
    ) -> ExecutionResult:
        return await graphql(
            self.build_schema(),
            query,
            root_value=root_value,
            context_value=context,
            variable_values=variables,
            operation_name=operation_name,
            middleware=self.middleware or None,
        )
