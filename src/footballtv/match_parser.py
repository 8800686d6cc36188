"""Match block parser for the TV schedule page.

Provides:
- parse_match: pure function turning one ``match`` subtree into a MatchModel

Each block of a match (phase, title, logos, channels, time) is optional.
A missing block leaves its fields as seeded; nothing here raises on
absent markup.
"""

import logging

from footballtv.models import MatchModel
from footballtv.tree import Node
from footballtv.tree_search import find_by_class, find_by_tag, join_text, node_attr

logger = logging.getLogger(__name__)


def _first_block(node: Node, class_name: str) -> Node | None:
    """Return the first ``class_name`` subtree that has children."""
    blocks = find_by_class(node, class_name)
    if blocks and blocks[0].children is not None:
        return blocks[0]
    return None


def _extract_phase(node: Node) -> str | None:
    block = _first_block(node, "m_phase")
    if block is None or not block.children:
        return None
    first = block.children[0]
    if isinstance(first, Node) and first.children is not None:
        return join_text(first)
    return None


def _extract_teams(node: Node) -> tuple[str | None, str | None] | None:
    block = _first_block(node, "m_title")
    if block is None:
        return None
    teams = [join_text(span) for span in find_by_tag(block, "span")]
    if len(teams) < 2:
        logger.debug("Match title lists %d team(s)", len(teams))
    home = teams[0] if len(teams) > 0 else None
    away = teams[1] if len(teams) > 1 else None
    return home, away


def _extract_logos(node: Node) -> tuple[str | None, str | None] | None:
    block = _first_block(node, "m_logos")
    if block is None:
        return None
    logos = [node_attr(img, "src") for img in find_by_tag(block, "img")]
    home = logos[0] if len(logos) > 0 else None
    away = logos[1] if len(logos) > 1 else None
    return home, away


def _extract_channels(node: Node) -> list[str] | None:
    block = _first_block(node, "m_chan")
    if block is None:
        return None
    # Empty spans stay in the list as "" so channel positions are kept.
    return [join_text(span) for span in find_by_tag(block, "span")]


def _extract_time(node: Node) -> str | None:
    blocks = find_by_class(node, "m_time")
    if not blocks:
        return None
    spans = find_by_tag(blocks[0], "span")
    if not spans:
        return None
    return join_text(spans[0])


def parse_match(node: Node, seed: MatchModel) -> MatchModel:
    """Parse a ``match`` subtree on top of a seeded MatchModel.

    Pure function: the seed is copied, never modified.

    Args:
        node: The subtree classed ``match``.
        seed: Model carrying inherited fields (``date``, ``competition``).

    Returns:
        A new MatchModel. The kickoff time text, when present, replaces
        ``date``. ``calendar_url`` is always ``""``.
    """
    updates: dict = {"calendar_url": ""}

    phase = _extract_phase(node)
    if phase is not None:
        updates["phase"] = phase

    teams = _extract_teams(node)
    if teams is not None:
        updates["home_team"], updates["away_team"] = teams

    logos = _extract_logos(node)
    if logos is not None:
        updates["home_logo"], updates["away_logo"] = logos

    channels = _extract_channels(node)
    if channels is not None:
        updates["tv"] = channels

    kickoff = _extract_time(node)
    if kickoff is not None:
        updates["date"] = kickoff
    else:
        logger.debug("Match without kickoff time, keeping date %r", seed.date)

    return seed.model_copy(update=updates, deep=True)
