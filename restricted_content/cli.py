"""CLI commands for restricted-content."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import yaml

from restricted_content.block import get_default_renderer
from restricted_content.engine.explain import explain as explain_access
from restricted_content.engine.identity import ViewerIdentity
from restricted_content.engine.matchers import create_matcher, is_valid_pattern
from restricted_content.markup import render_document
from restricted_content.spec.attributes import BlockAttributes


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load_attributes(
    attributes_path: Optional[str],
    pattern: Optional[str],
    restricted_message: Optional[str],
    not_logged_in_message: Optional[str],
) -> BlockAttributes:
    if attributes_path:
        try:
            config = BlockAttributes.load(Path(attributes_path))
        except (ValueError, yaml.YAMLError) as e:
            click.echo(f"❌ Invalid attributes file {attributes_path}: {e}", err=True)
            sys.exit(1)
    else:
        config = BlockAttributes()

    overrides = {
        "email_pattern": pattern,
        "logged_in_restricted_message": restricted_message,
        "not_logged_in_message": not_logged_in_message,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return config.model_copy(update=overrides) if overrides else config


def _viewer(email: Optional[str]) -> ViewerIdentity:
    if email is None:
        return ViewerIdentity.anonymous()
    return ViewerIdentity.logged_in(email)


BLOCK_OPTIONS = [
    click.option(
        "--attributes",
        "attributes_path",
        type=click.Path(exists=True, dir_okay=False),
        help="YAML file with block attributes.",
    ),
    click.option("--pattern", help="Email pattern, a regex without delimiters."),
    click.option(
        "--restricted-message", help="Message for logged-in users who do not match."
    ),
    click.option("--not-logged-in-message", help="Message for anonymous visitors."),
    click.option("--email", help="Email of the logged-in viewer. Omit for anonymous."),
]


def block_options(func):
    """Options describing one restricted block and the viewer."""
    for option in reversed(BLOCK_OPTIONS):
        func = option(func)
    return func


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose):
    """Render content restricted by viewer email."""
    _setup_logging(verbose)


@main.command()
@block_options
@click.option(
    "--content-file",
    type=click.File("r"),
    default="-",
    help="File with the inner content (default: stdin).",
)
def render(
    attributes_path,
    pattern,
    restricted_message,
    not_logged_in_message,
    email,
    content_file,
):
    """Render a restricted block for a viewer."""
    config = _load_attributes(
        attributes_path, pattern, restricted_message, not_logged_in_message
    )
    content = content_file.read()
    click.echo(get_default_renderer().render(config, _viewer(email), content))


@main.command("render-document")
@click.argument("document", type=click.File("r"))
@click.option("--email", help="Email of the logged-in viewer. Omit for anonymous.")
def render_document_command(document, email):
    """Render a serialized block document for a viewer."""
    click.echo(render_document(document.read(), _viewer(email)))


@main.command()
@block_options
def explain(
    attributes_path, pattern, restricted_message, not_logged_in_message, email
):
    """Explain which variant a viewer would get."""
    config = _load_attributes(
        attributes_path, pattern, restricted_message, not_logged_in_message
    )
    click.echo(str(explain_access(config, _viewer(email))))


@main.command("check-pattern")
@click.argument("pattern")
@click.argument("emails", nargs=-1)
def check_pattern(pattern, emails):
    """Check that PATTERN compiles and test it against EMAILS."""
    if not is_valid_pattern(pattern):
        click.echo(f"❌ Invalid pattern: {pattern}", err=True)
        click.echo("Logged-in viewers will see the restricted message.", err=True)
        sys.exit(1)

    click.echo(f"✅ Valid pattern: {pattern}")
    matcher = create_matcher(pattern)
    for email in emails:
        mark = "✓" if matcher.match(email) else "✗"
        click.echo(f"  {mark} {email}")


if __name__ == "__main__":
    main()
