from graphql import GraphQLError


class GraphQLCrudError(GraphQLError):
    """
    Raised by a resolver delegate, reported in the `errors` of the result.
    """
    pass


class GraphQLCrudBuildError(Exception):
    """
    Raised while augmenting a type registry, aborts the schema build.
    """
    pass
