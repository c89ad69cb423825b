"""Logic for rating how well an item matches a tokenized query."""

from collections.abc import Sequence

from docsearch.models import ItemRecord, MatchTier


def score_record(record: ItemRecord, tokens: Sequence[str]) -> MatchTier | None:
    """Return the best tier the record reaches, or None if it does not match.

    The first token decides the tier. Every further token must appear
    somewhere in the name, path or signature types, or the record is out.
    Tokens are expected to be lowercase already.
    """
    if not tokens:
        return None
    tier = _tier_for(record, tokens[0])
    if tier is None:
        return None
    for token in tokens[1:]:
        if not _appears_in(record, token):
            return None
    return tier


def _tier_for(record: ItemRecord, token: str) -> MatchTier | None:
    name = record.name.lower()
    if name == token:
        return MatchTier.EXACT
    if name.startswith(token):
        return MatchTier.PREFIX
    if token in name:
        return MatchTier.SUBSTRING
    if token in record.qualified_key:
        return MatchTier.PATH
    if token in record.signature_types:
        return MatchTier.SIGNATURE
    return None


def _appears_in(record: ItemRecord, token: str) -> bool:
    if token in record.search_key or token in record.qualified_key:
        return True
    return any(token in type_name for type_name in record.signature_types)
