"""Dependency Injection container - initialized at app startup."""

from collections.abc import Mapping, Sequence

from app.config import ScoringConfig, SynthesisConfig
from app.models.voting import DEFAULT_SLATE, TrackedLegislativeEvent
from app.services.accountability import AccountabilityService
from app.services.report import ReportAssembler
from app.services.scoring import ScoreCalculator, TieringEngine
from app.services.voting import VotePatternSynthesizer
from settings import RANDOM_SEED, TIER_CAPS


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        synthesis: SynthesisConfig | None = None,
        scoring: ScoringConfig | None = None,
        slate: Sequence[TrackedLegislativeEvent] = DEFAULT_SLATE,
        caps: Mapping[str, int] | None = None,
        force: bool = False,
    ) -> None:
        """Initialize all dependencies. Call once at app startup, or with force=True to rebuild."""
        if self._initialized and not force:
            return

        self.synthesis_config = synthesis or SynthesisConfig(seed=RANDOM_SEED)
        self.scoring_config = scoring or ScoringConfig()

        # Services (with injected config)
        self.synthesizer = VotePatternSynthesizer(slate=slate, config=self.synthesis_config)
        self.calculator = ScoreCalculator(slate=slate, config=self.scoring_config)
        self.tiering = TieringEngine()
        self.assembler = ReportAssembler(config=self.scoring_config, caps=caps or TIER_CAPS)

        self.accountability = AccountabilityService(
            synthesizer=self.synthesizer,
            calculator=self.calculator,
            tiering=self.tiering,
            assembler=self.assembler,
        )

        self._initialized = True


# Global container instance
container = Container()
