from dataclasses import dataclass
from typing import Optional

from restricted_content.engine.decision import DenialReason, Outcome, decide
from restricted_content.engine.identity import ViewerIdentity
from restricted_content.engine.matchers import create_matcher, is_valid_pattern
from restricted_content.spec.attributes import BlockAttributes

REASON_TEXT = {
    DenialReason.NOT_LOGGED_IN: "Viewer is not logged in",
    DenialReason.INVALID_PATTERN: "Email pattern does not compile, access denied",
    DenialReason.NO_MATCH: "Email does not match the pattern",
}


@dataclass
class AccessExplanation:
    email: Optional[str]
    logged_in: bool
    pattern: str
    pattern_valid: bool
    matched: Optional[bool]
    outcome: Outcome
    reason: Optional[DenialReason]

    def __repr__(self) -> str:
        return self.__str__()

    def __str__(self) -> str:
        viewer = self.email if self.logged_in else "anonymous"
        lines = [
            f"Access for {viewer}",
            f"  Logged in: {self.logged_in}",
            f"  Pattern:   {self.pattern} ({'valid' if self.pattern_valid else 'invalid'})",
        ]
        if self.matched is not None:
            lines.append(f"  Matched:   {self.matched}")
        lines.append(f"  Outcome:   {self.outcome.value}")
        if self.reason is not None:
            lines.append(f"  Reason:    {REASON_TEXT[self.reason]}")
        return "\n".join(lines)


def explain(config: BlockAttributes, viewer: ViewerIdentity) -> AccessExplanation:
    """Explain how a restricted block is resolved for a viewer. Not for page output."""
    decision = decide(config, viewer)
    pattern_valid = is_valid_pattern(decision.pattern)

    matched = None
    if viewer.is_logged_in and pattern_valid:
        matched = create_matcher(decision.pattern).match(viewer.email)

    return AccessExplanation(
        email=viewer.email,
        logged_in=viewer.is_logged_in,
        pattern=decision.pattern,
        pattern_valid=pattern_valid,
        matched=matched,
        outcome=decision.outcome,
        reason=decision.reason,
    )
