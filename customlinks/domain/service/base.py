"""Domain service base."""


class Service:
    """Marker base for domain services.

    Services hold repositories and apply link and identity rules that
    don't belong to a single model.
    """
