"""Pure scoring math - no dependencies, easily testable."""

SCORE_MIN, SCORE_MAX = 0, 100
PRIORITY_MIN, PRIORITY_MAX = 1, 10

# (minimum holdings, priority bonus), checked in order
HOLDINGS_BREAKPOINTS = ((10, 3), (5, 2), (1, 1))
# (margin strictly below, priority bonus), checked in order
MARGIN_BREAKPOINTS = ((1.0, 3), (2.5, 2), (5.0, 1))
# (margin strictly below, tier name), checked in order
TIER_THRESHOLDS = (("CRITICAL", 1.0), ("HIGH", 2.5), ("MEDIUM", 5.0))
FALLBACK_TIER = "LOW"

MAX_CONFLICT_PRIORITY = 3

FAVORABLE, UNFAVORABLE, ABSTAIN = "For", "Against", "Abstain"


def clamp(value: float, low: float, high: float) -> float:
    """Limit value to [low, high]."""
    return max(low, min(value, high))


def mean(values: list[float]) -> float:
    """Arithmetic mean, 0.0 for no values."""
    return sum(values) / len(values) if values else 0.0


def is_conflict(outcome: str, favorable_position: str) -> bool:
    """A vote against the event's favorable position, in either polarity."""
    if favorable_position == "FOR" and outcome == UNFAVORABLE:
        return True
    if favorable_position == "AGAINST" and outcome == FAVORABLE:
        return True
    return False


# ---------- synthesis ----------


def adjusted_likelihood(
    base: float,
    holdings: int,
    step: float = 0.1,
    cap: float = 0.3,
    ceiling: float = 0.95,
) -> float:
    """Unfavorable-vote likelihood after the capped holdings adjustment."""
    return min(base + min(holdings * step, cap), ceiling)


def draw_outcome(u: float, likelihood: float, abstain_band: float = 0.1) -> str:
    """Map a uniform draw in [0, 1) onto Against / Abstain / For."""
    if u < likelihood:
        return UNFAVORABLE
    if u < likelihood + abstain_band:
        return ABSTAIN
    return FAVORABLE


# ---------- inconsistency score ----------


def holdings_term(holdings: int, points: int = 5, cap: int = 50) -> int:
    """Ownership contribution, capped."""
    return min(holdings * points, cap)


def conflict_term(conflicts: int, points: int = 15) -> int:
    """Flat contribution per conflicting vote."""
    return conflicts * points


def weighted_conflict_term(weights: list[float]) -> float:
    """Each conflicting vote contributes its event's importance weight."""
    return float(sum(weights))


def vulnerability_term(margin: float | None, threshold: float = 5.0, points: int = 10) -> int:
    """Flat bonus for a known margin below threshold. Unknown margin never counts."""
    if margin is None:
        return 0
    return points if margin < threshold else 0


def inconsistency_score(*terms: float) -> int:
    """Sum of terms clamped to 0-100."""
    return int(clamp(round(sum(terms)), SCORE_MIN, SCORE_MAX))


# ---------- priority ----------


def holdings_bonus(holdings: int, breakpoints: tuple = HOLDINGS_BREAKPOINTS) -> int:
    for minimum, bonus in breakpoints:
        if holdings >= minimum:
            return bonus
    return 0


def margin_bonus(margin: float | None, breakpoints: tuple = MARGIN_BREAKPOINTS) -> int:
    if margin is None:
        return 0
    for below, bonus in breakpoints:
        if margin < below:
            return bonus
    return 0


def priority_score(holdings: int, conflicts: int, margin: float | None) -> int:
    """Outreach priority 1-10. Max contributions sum to exactly 10."""
    return (
        PRIORITY_MIN
        + holdings_bonus(holdings)
        + min(conflicts, MAX_CONFLICT_PRIORITY)
        + margin_bonus(margin)
    )


def combined_priority(
    score: int,
    priority: int,
    score_weight: float = 0.6,
    priority_weight: float = 0.4,
) -> float:
    """Blend of inconsistency score and priority scaled to 0-100."""
    return round(score * score_weight + priority * 10 * priority_weight, 2)


# ---------- tiering ----------


def tier_for_margin(margin: float | None, thresholds: tuple = TIER_THRESHOLDS) -> str:
    """Tier name from electoral margin alone."""
    if margin is None:
        return FALLBACK_TIER
    for tier, below in thresholds:
        if margin < below:
            return tier
    return FALLBACK_TIER


def engagement_strategy(margin: float | None, holdings: int) -> str:
    """Outreach strategy from margin and holdings."""
    if margin is None:
        return "RESEARCH_NEEDED"
    if margin < 1 and holdings >= 5:
        return "IMMEDIATE"
    if margin < 2.5 and holdings >= 3:
        return "FOCUSED"
    if margin < 5:
        return "SUSTAINED"
    return "LONG_TERM"
