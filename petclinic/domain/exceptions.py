"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class VisitAccessDeniedError(Exception):
    """Raised when an owner may not act on a visit.

    Either the visit's pet is not one of the owner's pets, or the visit has
    already been aborted.
    """

    def __init__(self, owner_id: int | None, visit_id: int | None):
        self.owner_id = owner_id
        self.visit_id = visit_id
        super().__init__(f"Owner '{owner_id}' may not act on visit '{visit_id}'")
