"""Domain-level failures."""


class StoreError(Exception):
    """Any failure reported by the relational store.

    Connectivity loss, missing tables, constraint violations and row
    conversion problems all surface as this single type; the driver
    exception is kept as ``__cause__``.
    """
