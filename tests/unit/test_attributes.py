"""Category 0: Parsing, defaults and YAML round trips of block configuration."""

import pytest
from pydantic import ValidationError

from restricted_content import RESTRICTED_CONTENT_BLOCK, BlockType
from restricted_content.spec.attributes import (
    DEFAULT_EMAIL_PATTERN,
    DEFAULT_LOGGED_IN_RESTRICTED_MESSAGE,
    DEFAULT_NOT_LOGGED_IN_MESSAGE,
    BlockAttributes,
)


def test_missing_fields_default():
    attrs = BlockAttributes.model_validate({})
    assert attrs.email_pattern == DEFAULT_EMAIL_PATTERN
    assert attrs.logged_in_restricted_message == ""
    assert attrs.not_logged_in_message == ""


def test_camel_case_and_snake_case_names():
    camel = BlockAttributes.model_validate(
        {"emailPattern": "@a\\.org", "notLoggedInMessage": "Sign in"}
    )
    snake = BlockAttributes(email_pattern="@a\\.org", not_logged_in_message="Sign in")
    assert camel == snake


def test_empty_values_fall_back_to_defaults():
    attrs = BlockAttributes(
        emailPattern="", loggedInRestrictedMessage="", notLoggedInMessage=""
    )
    assert attrs.effective_pattern == DEFAULT_EMAIL_PATTERN
    assert attrs.restricted_message == DEFAULT_LOGGED_IN_RESTRICTED_MESSAGE
    assert attrs.login_message == DEFAULT_NOT_LOGGED_IN_MESSAGE


def test_configured_messages_win_over_defaults():
    attrs = BlockAttributes(
        loggedInRestrictedMessage="<p>Staff only</p>",
        notLoggedInMessage="<p>Sign in first</p>",
    )
    assert attrs.restricted_message == "<p>Staff only</p>"
    assert attrs.login_message == "<p>Sign in first</p>"


def test_null_values_are_treated_as_empty():
    attrs = BlockAttributes.model_validate({"emailPattern": None})
    assert attrs.email_pattern == ""
    assert attrs.effective_pattern == DEFAULT_EMAIL_PATTERN


def test_unknown_attributes_are_ignored():
    attrs = BlockAttributes.model_validate({"className": "wide", "lock": {"move": True}})
    assert attrs == BlockAttributes()


def test_attributes_are_immutable():
    attrs = BlockAttributes()
    with pytest.raises(ValidationError):
        attrs.email_pattern = "@x"


def test_from_block_drops_values_of_the_wrong_type():
    attrs = BlockAttributes.from_block(
        {"emailPattern": 42, "notLoggedInMessage": "Sign in"}
    )
    assert attrs.effective_pattern == DEFAULT_EMAIL_PATTERN
    assert attrs.login_message == "Sign in"


def test_from_block_accepts_non_dict_input():
    assert BlockAttributes.from_block(None) == BlockAttributes()
    assert BlockAttributes.from_block(["emailPattern"]) == BlockAttributes()


def test_load_valid_yaml(tmp_path):
    yaml_content = """\
emailPattern: '@university\\.edu$'
loggedInRestrictedMessage: '<p>Students only.</p>'
"""
    path = tmp_path / "block.yaml"
    path.write_text(yaml_content)

    attrs = BlockAttributes.load(path)
    assert attrs.email_pattern == "@university\\.edu$"
    assert attrs.restricted_message == "<p>Students only.</p>"
    assert attrs.login_message == DEFAULT_NOT_LOGGED_IN_MESSAGE


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "block.yaml"
    path.write_text("")
    assert BlockAttributes.load(path) == BlockAttributes()


def test_load_invalid_yaml_raises(tmp_path):
    path = tmp_path / "block.yaml"
    path.write_text("emailPattern:\n  - one\n  - two\n")
    with pytest.raises(ValidationError):
        BlockAttributes.load(path)


def test_save_and_load(tmp_path):
    path = tmp_path / "block.yaml"
    attrs = BlockAttributes(emailPattern="@(a|b)\\.edu", notLoggedInMessage="Log in")
    attrs.save(path)

    assert "emailPattern" in path.read_text()
    assert BlockAttributes.load(path) == attrs


def test_block_type_declares_attribute_defaults():
    defaults = RESTRICTED_CONTENT_BLOCK.attribute_defaults()
    assert defaults == {
        "emailPattern": DEFAULT_EMAIL_PATTERN,
        "loggedInRestrictedMessage": "",
        "notLoggedInMessage": "",
    }


def test_block_type_requires_namespaced_name():
    with pytest.raises(ValueError, match="namespace/name"):
        BlockType(name="restricted-content")
    with pytest.raises(ValueError, match="namespace/name"):
        BlockType(name="Acme/Restricted")


def test_block_type_save_and_load(tmp_path):
    path = tmp_path / "block-type.yaml"
    RESTRICTED_CONTENT_BLOCK.save(path)

    loaded = BlockType.load(path)
    assert loaded == RESTRICTED_CONTENT_BLOCK
    assert loaded.icon == "lock"
