"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the business rules that span an entity and its
    collaborators (repositories, clocks, ID generators).
    """

    pass
