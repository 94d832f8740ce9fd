import logging
from dataclasses import dataclass
from typing import Any, Callable, Union

from restricted_content.engine.identity import (
    IdentityProvider,
    ViewerIdentity,
    resolve_viewer,
)
from restricted_content.spec.block_type import BlockType

logger = logging.getLogger(__name__)

RenderCallback = Callable[[dict[str, Any], str, ViewerIdentity], str]


class BlockRegistrationError(ValueError):
    pass


@dataclass
class RegisteredBlock:
    block_type: BlockType
    render_callback: RenderCallback


class BlockRegistry:
    """Named render callbacks for block types, looked up at render time."""

    def __init__(self):
        self._blocks: dict[str, RegisteredBlock] = {}

    def register(
        self, block_type: BlockType, render_callback: RenderCallback
    ) -> RegisteredBlock:
        if block_type.name in self._blocks:
            raise BlockRegistrationError(
                f"Block type already registered: {block_type.name}"
            )
        registered = RegisteredBlock(block_type, render_callback)
        self._blocks[block_type.name] = registered
        logger.debug("Registered block type %s", block_type.name)
        return registered

    def unregister(self, name: str) -> None:
        if self._blocks.pop(name, None) is not None:
            logger.debug("Unregistered block type %s", name)

    def is_registered(self, name: str) -> bool:
        return name in self._blocks

    def get(self, name: str) -> RegisteredBlock | None:
        return self._blocks.get(name)

    def names(self) -> list[str]:
        return sorted(self._blocks)

    def render_block(
        self,
        name: str,
        attributes: dict[str, Any] | None,
        content: str,
        viewer: Union[ViewerIdentity, IdentityProvider],
    ) -> str:
        """Render a block through its callback, with declared defaults applied.

        Blocks without a registered callback are emitted unchanged.
        """
        registered = self._blocks.get(name)
        if registered is None:
            return content

        merged = registered.block_type.attribute_defaults()
        if isinstance(attributes, dict):
            merged.update(attributes)
        return registered.render_callback(merged, content, resolve_viewer(viewer))
