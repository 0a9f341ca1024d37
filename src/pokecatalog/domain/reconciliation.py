"""Association reconciliation: requested type ids/names to the final type set."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pokecatalog.domain.model import Type
    from pokecatalog.domain.type_store import TypeStore

log = getLogger(__name__)


def reconcile_types(
    store: TypeStore,
    *,
    type_ids: Sequence[int] | None = None,
    type_names: Sequence[str] | None = None,
) -> list[Type]:
    """Return the complete, deduplicated type set for a Pokémon.

    Names are resolved first, in input order, through find-or-create. Ids are
    then resolved with one bulk lookup; ids that match no stored type are
    dropped. The first occurrence of each type id wins, so the result keeps
    first-seen order. Empty or absent inputs yield an empty list.
    """

    resolved: dict[int, Type] = {}

    for name in type_names or ():
        type_ = store.find_or_create(name)
        resolved.setdefault(type_.persisted_id, type_)

    if type_ids:
        found = store.find_many(type_ids)
        for type_ in found:
            resolved.setdefault(type_.persisted_id, type_)
        unknown = set(type_ids).difference(type_.persisted_id for type_ in found)
        if unknown:
            log.debug("Ignoring unknown type ids: %s", sorted(unknown))

    return list(resolved.values())
