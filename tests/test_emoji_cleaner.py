"""Tests for emoji classification and removal."""

from __future__ import annotations

import pytest

from nomoji.processing.emoji_cleaner import (
    EMOJI_RANGES,
    FilterResult,
    count_emoji,
    is_emoji,
    remove_emoji,
    strip_emoji,
)


SAMPLES = [
    "",
    "Hello World!",
    "Hello 😀 World 🌍!",
    "Café résumé naïve 日本語",
    "Legal: © ® ™",
    "Family: \U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466",
    "Flags: 🇺🇸🇬🇧🇯🇵",
    "Line 1 😀\r\nLine 2\tend",
]


def test_remove_emoji_basic() -> None:
    assert remove_emoji("Hello 😀 World 🌍!") == FilterResult(text="Hello  World !", removed=2)


def test_empty_string() -> None:
    assert remove_emoji("") == FilterResult(text="", removed=0)


def test_only_emojis() -> None:
    result = remove_emoji("😀🎉🚀🌍🔥")
    assert result.text == ""
    assert result.removed == 5


def test_unicode_text_preserved() -> None:
    text = "Café résumé naïve 日本語"
    assert remove_emoji(text) == FilterResult(text=text, removed=0)


def test_mixed_scripts_keep_labels() -> None:
    text = "English: Hello 😀 | 日本語: こんにちは 🌍 | العربية: مرحبا 🕌 | עברית: שלום ✡️ | 中文: 你好 🇨🇳"
    result = remove_emoji(text)
    assert result.removed >= 5
    for label in ("English:", "日本語:", "العربية:", "עברית:", "中文:"):
        assert label in result.text


def test_copyright_and_trademark() -> None:
    result = remove_emoji("Legal: © ® ™")
    assert result.text == "Legal:   "
    assert result.removed == 3


def test_newlines_and_whitespace_preserved() -> None:
    result = remove_emoji("Line 1 😀\nLine 2 🌍\n\nLine 4 🔥")
    assert result.text == "Line 1 \nLine 2 \n\nLine 4 "
    assert result.removed == 3


def test_control_characters_survive() -> None:
    controls = "".join(chr(c) for c in range(0x20)) + "\x7f"
    result = remove_emoji(f"{controls}😀")
    assert result.text == controls
    assert result.removed == 1


def test_flags_count_each_regional_indicator() -> None:
    result = remove_emoji("Flags: 🇺🇸🇬🇧🇯🇵🇫🇷🇩🇪")
    assert result.text == "Flags: "
    assert result.removed == 10


def test_skin_tone_modifiers_removed_separately() -> None:
    result = remove_emoji("People: 👋🏻👋🏼👋🏽👋🏾👋🏿")
    assert result.text == "People: "
    assert result.removed == 10


def test_zero_width_joiner_sequence_removed_per_code_point() -> None:
    result = remove_emoji("Family: \U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466")
    assert result.text == "Family: "
    assert result.removed == 7


def test_profession_sequence() -> None:
    result = remove_emoji("Astronaut: \U0001F468\u200d\U0001F680 Doctor: \U0001F469\u200d\u2695\ufe0f")
    assert result.text == "Astronaut:  Doctor: "
    assert result.removed == 7


def test_keycap_keeps_base_character() -> None:
    # '#' itself is not emoji; only the variation selector and keycap go
    result = remove_emoji("#\ufe0f\u20e3 1\ufe0f\u20e3")
    assert result.text == "# 1"
    assert result.removed == 4


def test_symbol_blocks() -> None:
    assert count_emoji("\u2665\ufe0f\u2666\ufe0f\u2660\ufe0f\u2663\ufe0f") == 8
    assert count_emoji("".join(chr(c) for c in range(0x2700, 0x270A))) == 10
    assert count_emoji("🟥🟦🟧🟨🟩") == 5
    assert count_emoji("🚗🚕🚙🚌🛸") == 5
    assert count_emoji("🥐🧀🫐🪴") == 4


def test_large_input() -> None:
    text = "".join(f"Line {i} with emoji 😀 and text 🚀 " for i in range(1000))
    result = remove_emoji(text)
    assert result.removed == 2000
    assert "😀" not in result.text and "🚀" not in result.text
    assert "Line 0 " in result.text and "Line 999 " in result.text


@pytest.mark.parametrize("char", ["\U0001F600", "\U0001F680", "\U0001F30D", "\u00a9", "\u200d", "\ufe0f", "\u20e3", "\u231a", "\u2b50", "\u3030"])
def test_is_emoji_true(char: str) -> None:
    assert is_emoji(char)


@pytest.mark.parametrize("char", ["a", "A", "1", "\u00e9", "\u65e5", " ", "\n", "\u2192", "\u2500", "\u200b", "\u2b51"])
def test_is_emoji_false(char: str) -> None:
    assert not is_emoji(char)


def test_is_emoji_accepts_code_points() -> None:
    assert is_emoji(0x1F600)
    assert is_emoji(0x2122)
    assert not is_emoji(0x41)


@pytest.mark.parametrize(
    "code",
    [0x25FF, 0x27C0, 0x1F650, 0x1F700, 0x1F800, 0x1FB00, 0x20E2, 0xFE10, 0x3031, 0x10FFFF],
)
def test_neighbours_of_ranges_are_not_emoji(code: int) -> None:
    assert not is_emoji(code)


def test_range_endpoints_are_inclusive() -> None:
    for low, high in EMOJI_RANGES:
        assert is_emoji(low)
        assert is_emoji(high)


def test_is_emoji_rejects_multi_character_strings() -> None:
    with pytest.raises(TypeError):
        is_emoji("ab")


@pytest.mark.parametrize("text", SAMPLES)
def test_length_law(text: str) -> None:
    result = remove_emoji(text)
    assert len(result.text) + result.removed == len(text)
    assert count_emoji(text) == result.removed


@pytest.mark.parametrize("text", SAMPLES)
def test_idempotent(text: str) -> None:
    once = remove_emoji(text)
    twice = remove_emoji(once.text)
    assert twice == FilterResult(text=once.text, removed=0)


@pytest.mark.parametrize("text", SAMPLES)
def test_output_is_subsequence_of_input(text: str) -> None:
    remaining = iter(text)
    assert all(char in remaining for char in strip_emoji(text))


def test_strip_emoji_returns_text_only() -> None:
    assert strip_emoji("Hello 😊") == "Hello "
