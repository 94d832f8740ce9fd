import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from restricted_content.engine.identity import ViewerIdentity
from restricted_content.engine.matchers import InvalidPatternError, create_matcher
from restricted_content.spec.attributes import BlockAttributes

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    ALLOWED = "allowed"
    LOGGED_IN_REJECTED = "logged_in_rejected"
    NOT_LOGGED_IN = "not_logged_in"


class DenialReason(str, Enum):
    NOT_LOGGED_IN = "not_logged_in"
    INVALID_PATTERN = "invalid_pattern"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class AccessDecision:
    outcome: Outcome
    reason: Optional[DenialReason]
    pattern: str

    @property
    def allowed(self) -> bool:
        return self.outcome == Outcome.ALLOWED


def decide(config: BlockAttributes, viewer: ViewerIdentity) -> AccessDecision:
    """Decide which variant of a restricted block the viewer gets.

    Fails closed: a pattern that does not compile denies a logged-in
    viewer with the same outcome as an email that does not match.
    """
    pattern = config.effective_pattern

    if not viewer.is_logged_in:
        decision = AccessDecision(
            Outcome.NOT_LOGGED_IN, DenialReason.NOT_LOGGED_IN, pattern
        )
    else:
        try:
            matcher = create_matcher(pattern)
        except InvalidPatternError as e:
            logger.debug("Email pattern does not compile: %s", e)
            decision = AccessDecision(
                Outcome.LOGGED_IN_REJECTED, DenialReason.INVALID_PATTERN, pattern
            )
        else:
            if matcher.match(viewer.email):
                decision = AccessDecision(Outcome.ALLOWED, None, pattern)
            else:
                decision = AccessDecision(
                    Outcome.LOGGED_IN_REJECTED, DenialReason.NO_MATCH, pattern
                )

    logger.debug(
        "Access decision: %s (%s)",
        decision.outcome.value,
        decision.reason.value if decision.reason else "granted",
    )
    return decision
