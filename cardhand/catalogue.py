"""Card catalogue: identity -> artwork handle mapping, built once from asset names."""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping

from cardhand.cards import CardIdentity, Suit, all_identities
from cardhand.naming import ParseFailure, parse_card_name, parse_suit_token

logger = logging.getLogger(__name__)

# Number of entries echoed at debug level after a build.
_REPORT_SAMPLE = 6

SuitGroup = Suit | str
Source = tuple[SuitGroup, str, Any]


@dataclass(frozen=True)
class DuplicateAsset:
    """An asset whose identity was already claimed by an earlier source."""

    identity: CardIdentity
    raw_name: str
    suit_group: SuitGroup


def _normalize_path(path: str) -> str:
    return str(path).replace("\\", "/").strip().rstrip("/").lower()


def resolve_suit_group(
    group: SuitGroup,
    suit_paths: Mapping[str, str] | None = None,
) -> Suit | None:
    """
    Resolve a suit group to a Suit.

    Accepts a Suit, a suit word ('Hearts', 'club') or a resource path whose
    last segment is a suit word ('Cards/Hearts'). A path listed in
    ``suit_paths`` (suit word -> path) resolves to that suit whatever its
    last segment is.
    """
    if isinstance(group, Suit):
        return group
    path = _normalize_path(group)
    for suit_name, configured in (suit_paths or {}).items():
        if _normalize_path(configured) == path:
            return parse_suit_token(suit_name)
    return parse_suit_token(path.rsplit("/", 1)[-1])


class DeckIndex:
    """
    Read-only catalogue of card identities and their artwork handles.

    Handles are opaque: they are stored and returned unchanged. The full
    deck listing keeps discovery order, which only serves as the shuffle's
    input order.
    """

    def __init__(
        self,
        handles: Mapping[CardIdentity, Any],
        duplicates: Iterable[DuplicateAsset] = (),
    ) -> None:
        self._handles: dict[CardIdentity, Any] = dict(handles)
        self._order: tuple[CardIdentity, ...] = tuple(self._handles)
        self._duplicates: tuple[DuplicateAsset, ...] = tuple(duplicates)

    def get(self, identity: CardIdentity) -> Any | None:
        """Return the artwork handle for an identity, or None if absent."""
        return self._handles.get(identity)

    def full_deck(self) -> tuple[CardIdentity, ...]:
        """Return every loaded identity in discovery order."""
        return self._order

    def size(self) -> int:
        """Return the number of loaded identities."""
        return len(self._order)

    @property
    def duplicates(self) -> tuple[DuplicateAsset, ...]:
        """Assets ignored because an earlier asset claimed the same identity."""
        return self._duplicates

    @property
    def is_complete(self) -> bool:
        """Check if all 52 identities are present."""
        return not self.missing()

    def missing(self) -> list[CardIdentity]:
        """Return the identities of a standard deck that were not loaded."""
        return [card for card in all_identities() if card not in self._handles]

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, identity: object) -> bool:
        return identity in self._handles

    def __iter__(self) -> Iterator[CardIdentity]:
        return iter(self._order)

    def __repr__(self) -> str:
        return f"DeckIndex(size={self.size()})"


def build(
    sources: Iterable[Source],
    suit_paths: Mapping[str, str] | None = None,
) -> DeckIndex:
    """
    Build a DeckIndex from (suit_group, raw_name, handle) sources.

    The first source to claim an identity wins; later duplicates are
    recorded on the index but do not replace it. Unparseable names are
    logged and skipped. An empty result is logged as an error and
    returned as-is, so callers must check size() before use.

    Args:
        sources: Iterable of (suit_group, raw_name, handle) triples
        suit_paths: Optional suit word -> resource path mapping, as in
            CatalogueConfig, for groups whose path does not end in a suit word

    Returns:
        The built DeckIndex
    """
    handles: dict[CardIdentity, Any] = {}
    duplicates: list[DuplicateAsset] = []

    for suit_group, raw_name, handle in sources:
        suit = resolve_suit_group(suit_group, suit_paths)
        if suit is None:
            logger.warning(
                "Skipping '%s': unknown suit group '%s'", raw_name, suit_group
            )
            continue

        result = parse_card_name(raw_name, suit)
        if isinstance(result, ParseFailure):
            logger.warning(
                "Skipping '%s' in suit group '%s': %s", raw_name, suit_group, result
            )
            continue

        if result in handles:
            logger.debug(
                "Ignoring duplicate '%s' in suit group '%s' for %s",
                raw_name,
                suit_group,
                result,
            )
            duplicates.append(DuplicateAsset(result, raw_name, suit_group))
            continue

        handles[result] = handle

    index = DeckIndex(handles, duplicates)

    if index.size() == 0:
        logger.error("No card artwork found. Check the asset groups and file names.")
        return index

    logger.info("Loaded %d cards", index.size())
    for identity in index.full_deck()[:_REPORT_SAMPLE]:
        logger.debug("  + %s -> %r", identity, index.get(identity))

    return index


def build_from_groups(
    groups: Mapping[SuitGroup, Iterable[tuple[str, Any]]],
    suit_paths: Mapping[str, str] | None = None,
) -> DeckIndex:
    """Build a DeckIndex from a mapping of suit group -> (raw_name, handle) pairs."""
    return build(
        (
            (group, raw_name, handle)
            for group, entries in groups.items()
            for raw_name, handle in entries
        ),
        suit_paths,
    )
