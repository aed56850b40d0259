from __future__ import annotations


class PersistableError(Exception):
    """
    Raised when a Persistable mapping is misconfigured.

    Generic base; raise one of the subclasses instead.
    """


class UnknownAdapter(PersistableError):
    """No codec was given, or the codec identifier is not registered."""


class UnknownLocation(PersistableError):
    """No target was given to persist the mapping to."""


NO_ADAPTER_MESSAGE = "You did not specify an adapter for this Persistable Hash."
NO_LOCATION_MESSAGE = "You did not specify where you want to persist this Persistable Hash."
