import logging

from typing import Any, Dict, Iterable, List, Mapping, Optional
from uuid import uuid4

from graphql import (
    GraphQLResolveInfo,
    get_nullable_type,
    is_abstract_type,
    is_list_type,
)

from graphql_crud.delegate import ResolverDelegate
from graphql_crud.error import GraphQLCrudError
from graphql_crud.mutations import payload_field_name

logger = logging.getLogger(__name__)


def _get_value(value: Any, key: str, default=None):
    if isinstance(value, Mapping):
        return value.get(key, default)
    return getattr(value, key, default)


class MemoryResolver(ResolverDelegate):
    """
    Keeps documents in a dictionary keyed by id.

    Each document is a dictionary tagged with its type name under the
    discriminator key. References to other documents are stored as ids,
    a single id for object fields and a list of ids for list fields.
    """

    def __init__(
        self,
        documents: Optional[Iterable[Dict[str, Any]]] = None,
        discriminator: str = "doctype",
    ):
        self.discriminator = discriminator
        self.documents: Dict[str, Dict[str, Any]] = {}

        for document in documents or []:
            self.put(document)

    def put(self, document: Dict[str, Any]) -> Dict[str, Any]:
        if self.discriminator not in document:
            raise ValueError(
                f"Document {document} has no '{self.discriminator}' value."
            )
        document = dict(document)
        document.setdefault("id", str(uuid4()))
        self.documents[str(document["id"])] = document
        return document

    def insert(self, type_name: str, **values) -> Dict[str, Any]:
        return self.put({**values, self.discriminator: type_name})

    def matches(
        self, document: Mapping, type_name: str, info: Optional[GraphQLResolveInfo]
    ) -> bool:
        doctype = document.get(self.discriminator)
        if doctype == type_name:
            return True
        if info is None or doctype is None:
            return False

        abstract_type = info.schema.get_type(type_name)
        concrete_type = info.schema.get_type(doctype)
        return (
            is_abstract_type(abstract_type)
            and concrete_type is not None
            and info.schema.is_sub_type(abstract_type, concrete_type)
        )

    def get(
        self,
        document_id: Any,
        type_name: str,
        info: Optional[GraphQLResolveInfo] = None,
    ) -> Optional[Dict[str, Any]]:
        document = self.documents.get(str(document_id))
        if document is not None and self.matches(document, type_name, info):
            return document
        return None

    def all(
        self, type_name: str, info: Optional[GraphQLResolveInfo] = None
    ) -> List[Dict[str, Any]]:
        return [
            document
            for document in self.documents.values()
            if self.matches(document, type_name, info)
        ]

    def resolve_list_or_single(self, parent, args, context, info, resolved_type_name):
        # Root fields have no parent path
        if info.path.prev is None:
            if is_list_type(get_nullable_type(info.return_type)):
                return self.all(resolved_type_name, info)
            return self.get(args.get("id"), resolved_type_name, info)

        documents = []
        for reference in _get_value(parent, info.field_name) or []:
            if isinstance(reference, Mapping):
                document = reference
            else:
                document = self.get(reference, resolved_type_name, info)
            if document is not None:
                documents.append(document)

        if args.get("id") is not None:
            documents = [
                document
                for document in documents
                if str(document.get("id")) == str(args["id"])
            ]

        return documents

    def resolve_by_parent_id(self, parent, args, context, info, resolved_type_name):
        reference = _get_value(parent, info.field_name)
        if reference is None or isinstance(reference, Mapping):
            return reference
        return self.get(reference, resolved_type_name, info)

    def resolve_upsert(self, parent, args, context, info, resolved_type_name):
        values = dict(args.get("input") or {})
        document_id = values.pop("id", None)
        document = None

        if document_id is not None:
            document = self.documents.get(str(document_id))

        if document is not None:
            if document.get(self.discriminator) != resolved_type_name:
                raise GraphQLCrudError(
                    f"Document '{document_id}' is a "
                    f"{document.get(self.discriminator)}, "
                    f"not a {resolved_type_name}."
                )
            document.update(values)
            logger.debug("Updated %s '%s'", resolved_type_name, document_id)
        else:
            if document_id is not None:
                values["id"] = document_id
            document = self.insert(resolved_type_name, **values)
            logger.debug("Created %s '%s'", resolved_type_name, document["id"])

        return {payload_field_name(resolved_type_name): document}

    def resolve_delete(self, parent, args, context, info, resolved_type_name):
        document_id = args.get("id")
        document = self.get(document_id, resolved_type_name)

        if document is None:
            raise GraphQLCrudError(
                f"{resolved_type_name} '{document_id}' does not exist."
            )

        del self.documents[str(document_id)]
        logger.debug("Deleted %s '%s'", resolved_type_name, document_id)

        return {
            payload_field_name(resolved_type_name): document,
            "deletedId": document_id,
        }
