"""Tiering engine - partition by margin, rank within tier."""

from loguru import logger

from app.models.scoring import TIER_ORDER, ScoredEntity, Tier


class TieringEngine:
    """Groups scored entities into tiers, each sorted by combined priority."""

    def partition(self, scored: list[ScoredEntity]) -> dict[Tier, list[ScoredEntity]]:
        tiers: dict[Tier, list[ScoredEntity]] = {tier: [] for tier in TIER_ORDER}
        for item in scored:
            tiers[item.score.tier].append(item)

        for tier, members in tiers.items():
            # Ties keep load order regardless of input order
            members.sort(key=lambda s: (-s.score.combined_priority, s.load_index))

        logger.info(
            "Tiered {} entities: {}",
            len(scored),
            ", ".join(f"{t}={len(m)}" for t, m in tiers.items()),
        )
        return tiers
