"""Tests for splitnote.prompts and splitnote.i18n modules."""

import pytest
from pydantic import ValidationError

import splitnote.config as _config
from splitnote.i18n import TRANSLATIONS, available_languages, get_translation
from splitnote.prompts import (
    DESCRIPTION_RULE,
    EMOJI_RULE,
    EXAMPLE_DIFF,
    NO_DESCRIPTION_RULE,
    NO_EMOJI_RULE,
    ChatMessage,
    PreambleTooLargeError,
    PromptPreamble,
    build_preamble,
    get_default_preamble,
)


class TestChatMessage:
    """Tests for ChatMessage model."""

    def test_valid_roles(self):
        """Test that the three chat roles are accepted."""
        for role in ("system", "user", "assistant"):
            assert ChatMessage(role=role, content="x").role == role

    def test_rejects_unknown_role(self):
        """Test that other roles fail validation."""
        with pytest.raises(ValidationError):
            ChatMessage(role="tool", content="x")


class TestPromptPreamble:
    """Tests for PromptPreamble dataclass."""

    def test_token_cost_includes_overhead(self, preamble):
        """Test the cost of a one-message preamble."""
        assert preamble.token_cost == 3 + 4

    def test_build_messages_appends_diff(self, preamble):
        """Test that the diff is the last user message."""
        messages = preamble.build_messages("diff text")

        assert messages[-1] == {"role": "user", "content": "diff text"}
        assert len(messages) == 2

    def test_build_messages_does_not_grow_preamble(self, preamble):
        """Test that building prompts leaves the preamble unchanged."""
        preamble.build_messages("one")
        preamble.build_messages("two")

        assert len(preamble.messages) == 1

    def test_budget(self, preamble):
        """Test that the budget is the limit minus the cost."""
        assert preamble.budget(3000) == 2993

    def test_budget_must_be_positive(self, preamble):
        """Test that a preamble consuming the whole limit raises."""
        with pytest.raises(PreambleTooLargeError) as exc_info:
            preamble.budget(5)

        assert "max_request_tokens" in str(exc_info.value)

    def test_preamble_too_large_is_value_error(self):
        """Test the exception hierarchy."""
        assert issubclass(PreambleTooLargeError, ValueError)


class TestBuildPreamble:
    """Tests for build_preamble function."""

    def test_three_roles(self):
        """Test the system, example user and example assistant messages."""
        preamble = build_preamble()

        assert [m.role for m in preamble.messages] == ["system", "user", "assistant"]
        assert preamble.messages[1].content == EXAMPLE_DIFF

    def test_plain_mode(self):
        """Test the default instructions and example answer."""
        preamble = build_preamble()
        system, _, answer = (m.content for m in preamble.messages)

        assert NO_EMOJI_RULE in system
        assert NO_DESCRIPTION_RULE in system
        assert "Use english to answer." in system
        assert answer.splitlines() == [
            TRANSLATIONS["en"].commit_fix,
            TRANSLATIONS["en"].commit_feat,
        ]

    def test_emoji_mode(self):
        """Test GitMoji instructions and prefixes."""
        preamble = build_preamble(emoji=True)
        system, _, answer = (m.content for m in preamble.messages)

        assert EMOJI_RULE in system
        assert answer.splitlines()[0].startswith("🐛 ")
        assert answer.splitlines()[1].startswith("✨ ")

    def test_description_mode(self):
        """Test that the description adds instructions and an example paragraph."""
        preamble = build_preamble(description=True)
        system, _, answer = (m.content for m in preamble.messages)

        assert DESCRIPTION_RULE in system
        assert answer.splitlines()[-1] == TRANSLATIONS["en"].commit_description

    def test_options_change_the_cost(self):
        """Test that richer preambles leave a smaller budget."""
        plain = build_preamble()
        rich = build_preamble(emoji=True, description=True)

        assert rich.token_cost > plain.token_cost

    def test_language(self):
        """Test that the answer language follows the translation."""
        preamble = build_preamble(language="de")

        assert "Use deutsch to answer." in preamble.messages[0].content
        assert TRANSLATIONS["de"].commit_fix in preamble.messages[2].content


class TestGetDefaultPreamble:
    """Tests for get_default_preamble function."""

    def test_is_cached(self):
        """Test that the preamble is built once for the same settings."""
        assert get_default_preamble() is get_default_preamble()

    def test_follows_config(self, monkeypatch):
        """Test that the active settings are used."""
        monkeypatch.setattr(_config, "EMOJI", True)
        monkeypatch.setattr(_config, "LANGUAGE", "fr")

        preamble = get_default_preamble()

        assert EMOJI_RULE in preamble.messages[0].content
        assert "français" in preamble.messages[0].content


class TestTranslations:
    """Tests for splitnote.i18n."""

    def test_known_language(self):
        """Test looking up a language code."""
        assert get_translation("es").local_language == "español"

    def test_case_insensitive(self):
        """Test that codes match regardless of case."""
        assert get_translation("zh_cn") is TRANSLATIONS["zh_CN"]

    def test_unknown_falls_back_to_english(self):
        """Test the English fallback."""
        assert get_translation("xx") is TRANSLATIONS["en"]
        assert get_translation(None) is TRANSLATIONS["en"]

    def test_available_languages(self):
        """Test the list of codes."""
        assert "en" in available_languages()
        assert set(available_languages()) == set(TRANSLATIONS)
