from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from restricted_content.engine.decision import Outcome, decide
from restricted_content.engine.identity import ViewerIdentity
from restricted_content.engine.sanitize import sanitize_message
from restricted_content.spec.attributes import BlockAttributes

BLOCK_TEMPLATE = "block.html"


@dataclass(frozen=True)
class RenderResult:
    outcome: Outcome
    html: str
    content: Optional[str] = None  # the passed-through inner content when allowed

    @property
    def restricted(self) -> bool:
        return self.outcome != Outcome.ALLOWED

    def __str__(self) -> str:
        return self.html


class AccessDecisionRenderer:
    """Renders one of the three variants of a restricted content block."""

    def __init__(self, templates_dir: Optional[Path] = None):
        if templates_dir is None:
            templates_dir = Path(__file__).parent.parent / "templates"

        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def render(
        self, config: BlockAttributes, viewer: ViewerIdentity, inner_content: str = ""
    ) -> str:
        return self.render_result(config, viewer, inner_content).html

    def render_result(
        self, config: BlockAttributes, viewer: ViewerIdentity, inner_content: str = ""
    ) -> RenderResult:
        decision = decide(config, viewer)

        if decision.outcome == Outcome.ALLOWED:
            # Inner content is already rendered by the host and is trusted
            html = self._wrap(Markup(inner_content), restricted=False)
            return RenderResult(decision.outcome, html, content=inner_content)

        if decision.outcome == Outcome.NOT_LOGGED_IN:
            message = config.login_message
        else:
            message = config.restricted_message

        html = self._wrap(Markup(sanitize_message(message)), restricted=True)
        return RenderResult(decision.outcome, html)

    def _wrap(self, body: Markup, restricted: bool) -> str:
        template = self.env.get_template(BLOCK_TEMPLATE)
        return template.render(body=body, restricted=restricted)
