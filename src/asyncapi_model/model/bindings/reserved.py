"""Placeholder binding for protocols whose binding object defines no fields yet."""

from ..base import ExtensibleModel


class ReservedBinding(ExtensibleModel):
    """A binding object reserved for future use.

    It declares no fields; anything written under it, such as a
    ``bindingVersion`` or vendor keys, is kept in ``extensions``.
    """
