"""
CHI Fusion Engine — Weighted Fusion of Modality Sub-Scores

This is where the Cognitive Health Index is computed. Scorers produce
per-modality votes; this module combines them and assigns a risk tier.

Constraints:
- Deterministic: CHI = round(sum(score_i * weight_i) / sum(weight_i))
- Weight table must cover all five modalities and sum to 1.0
- Risk tier is a fixed, gapless threshold ladder over the CHI
- Never consults history
"""

import logging
import math
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional, Sequence

from cognitive_health.exceptions import InvariantViolationError
from cognitive_health.generator import BiometricData, FacialScan, SleepRecord, VoiceSession
from cognitive_health.numeric import clamp, round_half_up

from .config import (
    MODALITY_WEIGHTS,
    SCORE_MAX,
    SCORE_MIN,
    THRESHOLD_LOW_RISK,
    THRESHOLD_MODERATE_RISK,
    WEIGHT_SUM_TOLERANCE,
)
from .schemas import CHIContribution, CHIResult, Modality, RiskLevel
from .scorers import score_behavioral, score_biometric, score_facial, score_sleep, score_voice

logger = logging.getLogger(__name__)


def validate_weights(weights: Mapping[Modality, float]) -> Dict[Modality, float]:
    """
    Check a weight table against the fusion invariants.

    Raises:
        InvariantViolationError: If a modality is missing or unknown, a
            weight lies outside [0, 1], or the weights do not sum to 1.0
    """
    table = {Modality(key): value for key, value in weights.items()}

    if set(table) != set(Modality):
        missing = sorted(m.value for m in set(Modality) - set(table))
        raise InvariantViolationError(
            "weight-coverage",
            f"weight table must cover every modality (missing: {missing})",
        )

    for modality, weight in table.items():
        if not 0.0 <= weight <= 1.0:
            raise InvariantViolationError(
                "weight-range",
                f"weight for {modality.value} is {weight}, expected [0, 1]",
            )

    total = math.fsum(table.values())
    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        raise InvariantViolationError(
            "weight-sum",
            f"modality weights sum to {total}, expected 1.0",
        )

    return table


def classify_risk_level(chi_score: int) -> RiskLevel:
    """
    Classify risk tier from the CHI.

    >= THRESHOLD_LOW_RISK -> LOW, >= THRESHOLD_MODERATE_RISK -> MODERATE,
    otherwise HIGH.

    Raises:
        InvariantViolationError: If chi_score lies outside [0, 100]
    """
    if not SCORE_MIN <= chi_score <= SCORE_MAX:
        raise InvariantViolationError(
            "chi-range",
            f"cannot classify CHI {chi_score}, expected [0, 100]",
        )

    if chi_score >= THRESHOLD_LOW_RISK:
        return RiskLevel.LOW
    elif chi_score >= THRESHOLD_MODERATE_RISK:
        return RiskLevel.MODERATE
    else:
        return RiskLevel.HIGH


class CHIFusionEngine:
    """
    Fuses the five modality contributions into a CHIResult.

    Pure deterministic logic. Same input = Same output (apart from the
    evaluation timestamp when none is supplied).
    """

    def __init__(self, weights: Optional[Mapping[Modality, float]] = None):
        """
        Initialize engine with a weight table.

        Args:
            weights: Override for MODALITY_WEIGHTS (validated eagerly)
        """
        self.weights = validate_weights(weights if weights is not None else MODALITY_WEIGHTS)

    def score_modalities(
        self,
        sleep: Optional[SleepRecord],
        voice: Optional[VoiceSession],
        facial: Optional[FacialScan],
        biometrics: BiometricData,
    ) -> List[CHIContribution]:
        """Run every scorer, in fusion order sleep -> biometric -> facial -> voice -> behavioral."""
        return [
            score_sleep(sleep, self.weights),
            score_biometric(biometrics, self.weights),
            score_facial(facial, self.weights),
            score_voice(voice, self.weights),
            score_behavioral(self.weights),
        ]

    def fuse(
        self,
        contributions: Sequence[CHIContribution],
        timestamp: Optional[datetime] = None,
    ) -> CHIResult:
        """
        Combine contributions into the CHI and its risk tier.

        Args:
            contributions: Exactly one contribution per modality
            timestamp: Evaluation timestamp (defaults to now, UTC)

        Returns:
            Immutable CHIResult

        Raises:
            InvariantViolationError: If modalities do not match the weight
                table one-to-one, or the weighted mean leaves [0, 100]
        """
        modalities = [c.modality for c in contributions]
        if len(modalities) != len(set(modalities)) or set(modalities) != set(self.weights):
            raise InvariantViolationError(
                "contribution-coverage",
                f"expected one contribution per modality, got {[m.value for m in modalities]}",
            )

        weighted_sum = math.fsum(c.score * c.weight for c in contributions)
        total_weight = math.fsum(c.weight for c in contributions)
        if total_weight <= 0:
            raise InvariantViolationError("weight-sum", "contribution weights sum to zero")

        weighted_mean = weighted_sum / total_weight
        if not SCORE_MIN <= weighted_mean <= SCORE_MAX:
            raise InvariantViolationError(
                "chi-range",
                f"weighted mean {weighted_mean} outside [0, 100]",
            )

        chi_score = int(clamp(round_half_up(weighted_mean), SCORE_MIN, SCORE_MAX))
        risk_level = classify_risk_level(chi_score)

        logger.debug(f"[CHIFusion] weighted_mean={weighted_mean:.3f} chi={chi_score} risk={risk_level.value}")

        return CHIResult(
            chi_score=chi_score,
            contributions=list(contributions),
            risk_level=risk_level,
            timestamp=timestamp or datetime.now(timezone.utc),
        )

    def calculate(
        self,
        sleep: Optional[SleepRecord],
        voice: Optional[VoiceSession],
        facial: Optional[FacialScan],
        biometrics: BiometricData,
        timestamp: Optional[datetime] = None,
    ) -> CHIResult:
        """Score every modality and fuse in one step."""
        contributions = self.score_modalities(sleep, voice, facial, biometrics)
        return self.fuse(contributions, timestamp=timestamp)


_DEFAULT_ENGINE = CHIFusionEngine()


def calculate_chi(
    sleep: Optional[SleepRecord],
    voice: Optional[VoiceSession],
    facial: Optional[FacialScan],
    biometrics: BiometricData,
    timestamp: Optional[datetime] = None,
) -> CHIResult:
    """Compute the CHI with the default weight table."""
    return _DEFAULT_ENGINE.calculate(sleep, voice, facial, biometrics, timestamp=timestamp)
