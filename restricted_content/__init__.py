from restricted_content.block import (
    RESTRICTED_CONTENT_BLOCK,
    RESTRICTED_CONTENT_BLOCK_NAME,
    create_default_registry,
    render_restricted_content,
)
from restricted_content.engine.decision import (
    AccessDecision,
    DenialReason,
    Outcome,
    decide,
)
from restricted_content.engine.explain import AccessExplanation, explain
from restricted_content.engine.identity import (
    IdentityProvider,
    ViewerIdentity,
)
from restricted_content.engine.matchers import InvalidPatternError, is_valid_pattern
from restricted_content.engine.registry import BlockRegistrationError, BlockRegistry
from restricted_content.engine.renderer import AccessDecisionRenderer, RenderResult
from restricted_content.markup import parse_blocks, render_document
from restricted_content.spec.attributes import BlockAttributes
from restricted_content.spec.block_type import AttributeSchema, BlockType

__version__ = "1.8.0"

__all__ = [
    "AccessDecision",
    "AccessDecisionRenderer",
    "AccessExplanation",
    "AttributeSchema",
    "BlockAttributes",
    "BlockRegistrationError",
    "BlockRegistry",
    "BlockType",
    "DenialReason",
    "IdentityProvider",
    "InvalidPatternError",
    "Outcome",
    "RESTRICTED_CONTENT_BLOCK",
    "RESTRICTED_CONTENT_BLOCK_NAME",
    "RenderResult",
    "ViewerIdentity",
    "create_default_registry",
    "decide",
    "explain",
    "is_valid_pattern",
    "parse_blocks",
    "render_document",
    "render_restricted_content",
]
