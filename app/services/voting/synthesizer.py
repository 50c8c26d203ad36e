"""Vote pattern synthesizer - plausible fallback votes for holders without records."""

import hashlib
from collections.abc import Callable, Sequence

import numpy as np
from loguru import logger

from app.config import SynthesisConfig
from app.models.roster import Entity
from app.models.voting import Provenance, TrackedLegislativeEvent, VoteOutcome, VoteRecord, VotingRecord
from helpers import formulas

RngFactory = Callable[[str], np.random.Generator]


def entity_seed(seed: int, name: str) -> int:
    """Stable 64-bit seed for one entity's stream."""
    digest = hashlib.sha256(f"{seed}:{name}".encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


class VotePatternSynthesizer:
    """Draws one outcome per tracked event from affiliation and holdings.

    Each entity gets an independent random stream. With ``config.seed`` set the
    stream is derived from the seed and the entity name, so results do not
    depend on load order. Without a seed, streams use fresh entropy.
    """

    def __init__(
        self,
        slate: Sequence[TrackedLegislativeEvent],
        config: SynthesisConfig | None = None,
        rng_factory: RngFactory | None = None,
    ):
        self._slate = tuple(slate)
        self._config = config or SynthesisConfig()
        self._rng_factory = rng_factory or self._default_rng
        logger.debug("VotePatternSynthesizer initialized: {} events, seed={}", len(self._slate), self._config.seed)

    @property
    def config(self) -> SynthesisConfig:
        return self._config

    @property
    def slate(self) -> tuple[TrackedLegislativeEvent, ...]:
        return self._slate

    def _default_rng(self, name: str) -> np.random.Generator:
        if self._config.seed is None:
            return np.random.default_rng()
        return np.random.default_rng(entity_seed(self._config.seed, name))

    def likelihood(self, entity: Entity) -> float:
        """Adjusted unfavorable-vote likelihood for an entity."""
        cfg = self._config
        return formulas.adjusted_likelihood(
            cfg.base_likelihood(entity.affiliation),
            entity.holdings,
            step=cfg.holdings_step,
            cap=cfg.holdings_cap,
            ceiling=cfg.likelihood_ceiling,
        )

    def draw(self, likelihood: float, rng: np.random.Generator) -> VoteOutcome:
        """One outcome from the three-way distribution."""
        return VoteOutcome(formulas.draw_outcome(float(rng.random()), likelihood, self._config.abstain_band))

    def synthesize(self, entity: Entity) -> VotingRecord:
        """Complete synthetic record across the slate. Does not touch the entity."""
        rng = self._rng_factory(entity.name)
        p = self.likelihood(entity)

        votes = [VoteRecord.for_event(event, self.draw(p, rng)) for event in self._slate]
        record = VotingRecord(provenance=Provenance.SYNTHESIZED, total_tracked=len(self._slate), votes=votes)

        logger.debug(
            "Synthesized {} votes for {} (p={:.2f}, conflicts={})",
            len(votes),
            entity.name,
            p,
            record.conflicts,
        )
        return record
