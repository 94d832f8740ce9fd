from functools import lru_cache
from typing import Any

from restricted_content.engine.identity import ViewerIdentity
from restricted_content.engine.registry import BlockRegistry
from restricted_content.engine.renderer import AccessDecisionRenderer
from restricted_content.spec.attributes import DEFAULT_EMAIL_PATTERN, BlockAttributes
from restricted_content.spec.block_type import AttributeSchema, BlockType

RESTRICTED_CONTENT_BLOCK_NAME = "email-restriction-content-block/restricted-content"

RESTRICTED_CONTENT_BLOCK = BlockType(
    name=RESTRICTED_CONTENT_BLOCK_NAME,
    title="Restricted Content",
    description=(
        "A block to display nested blocks only to logged-in users with an "
        "email matching a specified pattern."
    ),
    category="common",
    icon="lock",
    attributes={
        "emailPattern": AttributeSchema(type="string", default=DEFAULT_EMAIL_PATTERN),
        "loggedInRestrictedMessage": AttributeSchema(type="string", default=""),
        "notLoggedInMessage": AttributeSchema(type="string", default=""),
    },
)


@lru_cache(maxsize=1)
def get_default_renderer() -> AccessDecisionRenderer:
    return AccessDecisionRenderer()


def render_restricted_content(
    attributes: dict[str, Any], content: str, viewer: ViewerIdentity
) -> str:
    """Render callback for the restricted content block."""
    config = BlockAttributes.from_block(attributes)
    return get_default_renderer().render(config, viewer, content)


def create_default_registry() -> BlockRegistry:
    registry = BlockRegistry()
    registry.register(RESTRICTED_CONTENT_BLOCK, render_restricted_content)
    return registry
