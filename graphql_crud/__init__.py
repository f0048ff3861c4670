# flake8: noqa

from graphql_crud.error import GraphQLCrudError, GraphQLCrudBuildError
from graphql_crud.config import AugmentOptions
from graphql_crud.registry import TypeRegistry
from graphql_crud.shapes import FieldShape, FieldType, inspect_field_type
from graphql_crud.delegate import ResolverDelegate, TypeDispatchDelegate
from graphql_crud.memory import MemoryResolver
from graphql_crud.mutations import DeleteMutationField, UpsertMutationField
from graphql_crud.augmenter import \
    SchemaAugmenter, \
    SchemaAugmentation, \
    generate
from graphql_crud.api import GraphQLCrudAPI
