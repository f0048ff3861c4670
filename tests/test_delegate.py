import pytest

from graphql_crud import GraphQLCrudError, ResolverDelegate, TypeDispatchDelegate


class BookDelegate(ResolverDelegate):

    def resolve_list_or_single(self, parent, args, context, info, resolved_type_name):
        return [{"id": "b1", "doctype": resolved_type_name}]

    def resolve_upsert(self, parent, args, context, info, resolved_type_name):
        return {"book": args["input"]}


class TestResolverDelegate:

    def test_supports_everything(self):
        assert ResolverDelegate().supports("Anything")

    def test_operations_not_implemented(self):
        delegate = ResolverDelegate()

        with pytest.raises(NotImplementedError, match="resolve_delete"):
            delegate.resolve_delete(None, {}, None, None, "Book")


class TestTypeDispatchDelegate:

    def test_supports_registered_types(self):
        delegate = TypeDispatchDelegate({"Book": BookDelegate()})

        assert delegate.supports("Book")
        assert not delegate.supports("Person")

    def test_dispatch(self):
        delegate = TypeDispatchDelegate({"Book": BookDelegate()})

        assert delegate.resolve_list_or_single(None, {}, None, None, "Book") == [
            {"id": "b1", "doctype": "Book"}
        ]
        assert delegate.resolve_upsert(
            None, {"input": {"title": "Emma"}}, None, None, "Book"
        ) == {"book": {"title": "Emma"}}

    def test_dispatch_unknown_type(self):
        delegate = TypeDispatchDelegate({"Book": BookDelegate()})

        with pytest.raises(GraphQLCrudError, match="Person"):
            delegate.resolve_by_parent_id(None, {}, None, None, "Person")

    def test_handlers_are_fixed(self):
        handlers = {"Book": BookDelegate()}
        delegate = TypeDispatchDelegate(handlers)
        handlers["Person"] = BookDelegate()

        assert not delegate.supports("Person")
