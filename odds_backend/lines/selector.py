"""Outcome selection within a single bookmaker market.

Given the outcomes one sportsbook offers for a market, pick the one the caller
asked for:
- h2h: the outcome named after the team
- spreads: the team's outcome whose line is closest to the requested spread
- totals: the Over/Under outcome whose line is closest to the requested total

Exact matches win; otherwise the numerically closest line is used.
"""

from collections.abc import Callable, Sequence

from odds_backend.lines.models import Outcome, SelectionCriteria


def _same_name(outcome: Outcome, name: str) -> bool:
    return outcome.name.lower() == name.lower()


def nearest_by_point(
    outcomes: Sequence[Outcome],
    keep: Callable[[Outcome], bool],
    want: float | None,
) -> Outcome | None:
    """Pick the kept outcome whose point is closest to `want`.

    Args:
        outcomes: Outcomes to search, in upstream order
        keep: Filter applied before searching (team name, Over/Under side)
        want: Target line, or None to take the first kept outcome

    Returns:
        The closest outcome (earliest wins ties), the first kept outcome when
        no target is given or none has a usable point, or None when the
        filter keeps nothing.
    """
    kept = [o for o in outcomes if keep(o)]
    if not kept:
        return None
    if want is None:
        return kept[0]

    best: Outcome | None = None
    best_diff = float("inf")
    for outcome in kept:
        if outcome.point is None:
            continue
        diff = abs(outcome.point - want)
        if diff < best_diff:
            best = outcome
            best_diff = diff
    return best if best is not None else kept[0]


def totals_side(side: str | None) -> str:
    """Anything starting with "u" is Under; everything else is Over."""
    return "under" if (side or "").lower().startswith("u") else "over"


def pick_outcome(
    market_key: str,
    outcomes: Sequence[Outcome] | None,
    criteria: SelectionCriteria,
) -> Outcome | None:
    """Pick the outcome matching the selection criteria.

    Args:
        market_key: Normalized market key ("h2h", "spreads", "totals", ...)
        outcomes: Outcomes from one bookmaker's market, in upstream order
        criteria: Team, side and target points to match

    Returns:
        The selected outcome, or None when there is nothing to choose from
        (no outcomes, or no outcome for the requested team/side).
    """
    if not isinstance(outcomes, (list, tuple)) or not outcomes:
        return None

    if market_key == "h2h":
        if criteria.team:
            for outcome in outcomes:
                if _same_name(outcome, criteria.team):
                    return outcome
        return outcomes[0]

    if market_key == "spreads":
        team = criteria.team or ""
        return nearest_by_point(
            outcomes, lambda o: _same_name(o, team), criteria.spread_point
        )

    if market_key == "totals":
        side = totals_side(criteria.side)
        return nearest_by_point(
            outcomes, lambda o: _same_name(o, side), criteria.total_point
        )

    return outcomes[0]
