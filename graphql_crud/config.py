from typing import List

from pydantic import BaseModel, ConfigDict, Field


class AugmentOptions(BaseModel):
    """
    Naming conventions used to pick the domain types of a registry and to
    decide which fields are generated for them.
    """

    model_config = ConfigDict(frozen=True)

    pagination_enabled: bool = False
    discriminator: str = "doctype"
    query_type_name: str = "Query"
    mutation_type_name: str = "Mutation"
    subscription_type_name: str = "Subscription"
    reserved_interface_names: List[str] = Field(default_factory=lambda: ["Node"])
    excluded_object_names: List[str] = Field(
        default_factory=lambda: ["Query", "Mutation", "Subscription", "Viewer"]
    )
    excluded_name_markers: List[str] = Field(
        default_factory=lambda: ["Connection", "Payload"]
    )

    def is_domain_object_name(self, name: str) -> bool:
        if name in self.excluded_object_names:
            return False
        return not any(marker in name for marker in self.excluded_name_markers)

    def is_domain_interface_name(self, name: str) -> bool:
        return name not in self.reserved_interface_names
