from typing import Any, Dict, Mapping

from graphql import GraphQLResolveInfo

from graphql_crud.error import GraphQLCrudError


class ResolverDelegate:
    """
    Performs the data access behind every generated field.

    Each operation receives the parent value, the field arguments, the
    execution context, the resolve info and the name of the type the field
    resolves to. It may return the data directly or an awaitable.
    """

    def supports(self, type_name: str) -> bool:
        return True

    def resolve_list_or_single(
        self,
        parent: Any,
        args: Dict[str, Any],
        context: Any,
        info: GraphQLResolveInfo,
        resolved_type_name: str,
    ):
        raise NotImplementedError(
            f"{self.__class__.__name__} has not "
            f"implemented 'resolve_list_or_single'"
        )

    def resolve_by_parent_id(
        self,
        parent: Any,
        args: Dict[str, Any],
        context: Any,
        info: GraphQLResolveInfo,
        resolved_type_name: str,
    ):
        raise NotImplementedError(
            f"{self.__class__.__name__} has not "
            f"implemented 'resolve_by_parent_id'"
        )

    def resolve_upsert(
        self,
        parent: Any,
        args: Dict[str, Any],
        context: Any,
        info: GraphQLResolveInfo,
        resolved_type_name: str,
    ):
        raise NotImplementedError(
            f"{self.__class__.__name__} has not "
            f"implemented 'resolve_upsert'"
        )

    def resolve_delete(
        self,
        parent: Any,
        args: Dict[str, Any],
        context: Any,
        info: GraphQLResolveInfo,
        resolved_type_name: str,
    ):
        raise NotImplementedError(
            f"{self.__class__.__name__} has not "
            f"implemented 'resolve_delete'"
        )


class TypeDispatchDelegate(ResolverDelegate):
    """
    Routes every call to the delegate registered for the resolved type name.

    The set of supported names is fixed when the dispatcher is created, so an
    augmenter can reject unknown types while the schema is being built.
    """

    def __init__(self, handlers: Mapping[str, ResolverDelegate]):
        self.handlers = dict(handlers)

    def supports(self, type_name: str) -> bool:
        return type_name in self.handlers

    def handler_for(self, type_name: str) -> ResolverDelegate:
        try:
            return self.handlers[type_name]
        except KeyError:
            raise GraphQLCrudError(
                f"No resolver delegate registered for type '{type_name}'."
            ) from None

    def resolve_list_or_single(self, parent, args, context, info, resolved_type_name):
        return self.handler_for(resolved_type_name).resolve_list_or_single(
            parent, args, context, info, resolved_type_name
        )

    def resolve_by_parent_id(self, parent, args, context, info, resolved_type_name):
        return self.handler_for(resolved_type_name).resolve_by_parent_id(
            parent, args, context, info, resolved_type_name
        )

    def resolve_upsert(self, parent, args, context, info, resolved_type_name):
        return self.handler_for(resolved_type_name).resolve_upsert(
            parent, args, context, info, resolved_type_name
        )

    def resolve_delete(self, parent, args, context, info, resolved_type_name):
        return self.handler_for(resolved_type_name).resolve_delete(
            parent, args, context, info, resolved_type_name
        )
