"""Schedule page parser: node tree to an ordered list of matchdays.

Provides:
- build_matchdays: walk ``matchday`` blocks and collect their matches
- parse_schedule: locate the blocks in a full page tree and build from them

A matchday block is a flat run of children: an ``h2`` date heading first,
then competition headers and rows of match cards. Competition headers
apply to every following row, across block boundaries, until the next
header.
"""

import logging

from footballtv.match_parser import parse_match
from footballtv.models import MatchdayModel, MatchModel
from footballtv.tree import Node
from footballtv.tree_search import find_by_class, node_class

logger = logging.getLogger(__name__)

MATCHDAY_CLASS = "matchday"
COMPETITION_HEADER_CLASS = "matchdayCompetitionHeader"
MATCH_ROW_CLASS = "row row-eq-height"
MATCH_CLASS = "match"


def _competition_name(header: Node) -> str | None:
    first = header.children[0] if header.children else None
    if not isinstance(first, Node) or not first.children:
        return None
    name = first.children[0]
    return name if isinstance(name, str) else None


def build_matchdays(matchday_nodes: list[Node]) -> list[MatchdayModel]:
    """Build matchdays from ``matchday`` blocks in document order.

    Args:
        matchday_nodes: Nodes classed ``matchday``, e.g. from
            ``find_by_class(root, "matchday")``.

    Returns:
        The matchdays in heading order. Matches of a block without its own
        date heading are appended to the previous matchday; matches found
        before any heading are dropped.
    """
    matchdays: list[MatchdayModel] = []
    competitions: list[str] = []
    # Kickoff dates are never recorded here; matches take their date from
    # the m_time block, or keep None.
    dates: list[str] = []

    for block in matchday_nodes:
        for idx, child in enumerate(block.children or []):
            if not isinstance(child, Node) or child.children is None:
                continue

            if idx == 0 and child.tag == "h2":
                heading = child.children[0] if child.children else None
                if isinstance(heading, str):
                    matchdays.append(MatchdayModel(date=heading, matches=[]))
                else:
                    logger.debug("Matchday heading without text, skipped")

            elif node_class(child) == COMPETITION_HEADER_CLASS:
                name = _competition_name(child)
                if name is not None:
                    competitions.append(name)
                else:
                    logger.debug("Competition header without a name, skipped")

            elif node_class(child) == MATCH_ROW_CLASS:
                for match_node in find_by_class(child, MATCH_CLASS):
                    if not matchdays:
                        logger.debug("Match before any matchday heading, skipped")
                        continue
                    seed = MatchModel(
                        date=dates[-1] if dates else None,
                        competition=competitions[-1] if competitions else None,
                        flag="",
                        home_team="",
                        away_team="",
                        calendar_url="",
                        tv=[],
                    )
                    matchdays[-1].matches.append(parse_match(match_node, seed))

    logger.debug(
        "Built %d matchdays with %d matches",
        len(matchdays), sum(len(m.matches) for m in matchdays),
    )
    return matchdays


def parse_schedule(root: Node) -> list[MatchdayModel]:
    """Parse a full schedule page tree into matchdays.

    Pure function: tree in, matchdays out. Returns an empty list when the
    page has no ``matchday`` blocks.
    """
    return build_matchdays(find_by_class(root, MATCHDAY_CLASS))
