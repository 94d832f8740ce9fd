"""Parsing and rendering of serialized block documents.

Blocks are delimited by HTML comments::

    <!-- wp:namespace/name {"attr": "value"} -->inner html<!-- /wp:namespace/name -->
    <!-- wp:namespace/name {"attr": "value"} /-->

Names without a namespace belong to ``core``. Text outside any block is
kept as freeform blocks (``name is None``).
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from restricted_content.block import create_default_registry
from restricted_content.engine.identity import (
    IdentityProvider,
    ViewerIdentity,
    resolve_viewer,
)
from restricted_content.engine.registry import BlockRegistry

logger = logging.getLogger(__name__)

BLOCK_DELIMITER = re.compile(
    r"<!--\s+(?P<closer>/)?wp:(?P<namespace>[a-z][a-z0-9_-]*/)?(?P<name>[a-z][a-z0-9_-]*)"
    r"\s+(?P<attrs>\{(?:(?!-->).)*?\}\s+)?(?P<void>/)?-->",
    re.DOTALL,
)

DEFAULT_NAMESPACE = "core/"


@dataclass
class ParsedBlock:
    name: Optional[str]
    attributes: dict[str, Any] = field(default_factory=dict)
    inner_blocks: list["ParsedBlock"] = field(default_factory=list)
    inner_html: str = ""
    # Text chunks in document order, None marks where an inner block goes
    inner_content: list[Optional[str]] = field(default_factory=list)


def parse_blocks(document: str) -> list[ParsedBlock]:
    output: list[ParsedBlock] = []
    stack: list[ParsedBlock] = []
    offset = 0

    for token in BLOCK_DELIMITER.finditer(document):
        _add_text(stack, output, document[offset : token.start()])
        offset = token.end()

        if token.group("closer"):
            if not stack:
                _add_text(stack, output, token.group(0))
                continue
            _attach(stack, output, stack.pop())
            continue

        block = ParsedBlock(
            name=_block_name(token), attributes=_parse_attributes(token.group("attrs"))
        )
        if token.group("void"):
            _attach(stack, output, block)
        else:
            stack.append(block)

    _add_text(stack, output, document[offset:])

    # Unclosed blocks run to the end of the document
    while stack:
        _attach(stack, output, stack.pop())

    return output


def render_block(
    block: ParsedBlock, viewer: ViewerIdentity, registry: BlockRegistry
) -> str:
    if block.name is None:
        return block.inner_html

    children = iter(block.inner_blocks)
    parts = []
    for chunk in block.inner_content:
        if chunk is None:
            parts.append(render_block(next(children), viewer, registry))
        else:
            parts.append(chunk)

    return registry.render_block(block.name, block.attributes, "".join(parts), viewer)


def render_document(
    document: str,
    viewer: Union[ViewerIdentity, IdentityProvider],
    registry: Optional[BlockRegistry] = None,
) -> str:
    if registry is None:
        registry = create_default_registry()
    viewer = resolve_viewer(viewer)
    return "".join(
        render_block(block, viewer, registry) for block in parse_blocks(document)
    )


def _block_name(token: re.Match) -> str:
    namespace = token.group("namespace") or DEFAULT_NAMESPACE
    return namespace + token.group("name")


def _parse_attributes(raw: Optional[str]) -> dict[str, Any]:
    if not raw:
        return {}
    try:
        attributes = json.loads(raw)
    except json.JSONDecodeError:
        logger.debug("Ignoring block attributes that are not valid JSON")
        return {}
    return attributes if isinstance(attributes, dict) else {}


def _add_text(stack: list[ParsedBlock], output: list[ParsedBlock], text: str) -> None:
    if not text:
        return
    if stack:
        stack[-1].inner_html += text
        stack[-1].inner_content.append(text)
    else:
        output.append(ParsedBlock(name=None, inner_html=text, inner_content=[text]))


def _attach(
    stack: list[ParsedBlock], output: list[ParsedBlock], block: ParsedBlock
) -> None:
    if stack:
        stack[-1].inner_blocks.append(block)
        stack[-1].inner_content.append(None)
    else:
        output.append(block)
