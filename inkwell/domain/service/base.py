"""Common base for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that involve more than one entity (slugs,
    votes, sessions) and talk to repositories through their interfaces.
    """
