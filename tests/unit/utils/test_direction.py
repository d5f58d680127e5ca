"""Unit tests for text direction detection and RTL shaping."""

import pytest

from scriptpress.parser.models import ScriptElementType
from scriptpress.utils.direction import (
    Alignment,
    TextDirection,
    alignment_for,
    direction,
    is_rtl,
    mirror_brackets,
    position_x,
    reverse_embedded_digits,
    shape,
    visual_order,
)


class TestIsRtl:
    @pytest.mark.parametrize(
        "text",
        [
            "שלום",
            "مرحبا",
            "\u072b\u0720\u0721\u0710",  # Syriac
            "\u078b\u07a8\u0788\u07ac\u0780\u07a8",  # Thaana
            "\ufb50",  # Arabic presentation form
            "INT. KITCHEN - לילה",
        ],
    )
    def test_rtl_text(self, text):
        assert is_rtl(text)
        assert direction(text) is TextDirection.RTL

    @pytest.mark.parametrize("text", ["", "Hello", "123 (456)", "Привет", "日本語"])
    def test_ltr_text(self, text):
        assert not is_rtl(text)
        assert direction(text) is TextDirection.LTR


class TestShaping:
    def test_digit_runs_reversed_in_rtl_text(self):
        assert reverse_embedded_digits("בשעה 11 ו-205") == "בשעה 11 ו-502"

    def test_digits_untouched_in_ltr_text(self):
        assert reverse_embedded_digits("Room 205") == "Room 205"

    def test_brackets_swapped_in_rtl_text(self):
        assert mirror_brackets("אמר (בשקט) [שוב] {אולי}") == "אמר )בשקט( ]שוב[ }אולי{"

    def test_brackets_untouched_in_ltr_text(self):
        assert mirror_brackets("said (quietly)") == "said (quietly)"

    def test_mirroring_twice_restores_text(self):
        text = "אמר (בשקט) ואז [שוב]"
        assert mirror_brackets(mirror_brackets(text)) == text

    def test_empty_brackets_are_left_alone(self):
        assert mirror_brackets("ריק ()") == "ריק ()"

    def test_shape_reverses_digits_then_mirrors(self):
        assert shape("הקומקום (בקול) בשעה 11") == "הקומקום )בקול( בשעה 11"
        assert shape("חדר (205)") == "חדר )502("

    def test_shape_is_identity_for_ltr(self):
        text = "INT. ROOM 205 (NIGHT)"
        assert shape(text) == text


class TestVisualOrder:
    def test_latin_words_keep_their_spelling(self):
        assert visual_order("אני אוהב Python") == "Python בהוא ינא"

    def test_digits_read_left_to_right(self):
        assert visual_order(shape("בשעה 11 בלילה")) == "הלילב 11 העשב"

    def test_empty(self):
        assert visual_order("") == ""

    def test_ltr_paragraph(self):
        assert visual_order("Hello 42", TextDirection.LTR) == "Hello 42"


class TestAlignment:
    @pytest.mark.parametrize(
        ("element_type", "text", "expected"),
        [
            (ScriptElementType.ACTION, "Dana enters.", Alignment.LEFT),
            (ScriptElementType.ACTION, "דנה נכנסת.", Alignment.RIGHT),
            (ScriptElementType.DIALOGUE, "Hello", Alignment.LEFT),
            (ScriptElementType.DIALOGUE, "שלום", Alignment.RIGHT),
            (ScriptElementType.TRANSITION, "CUT TO:", Alignment.RIGHT),
            (ScriptElementType.TRANSITION, "חיתוך אל:", Alignment.LEFT),
            (ScriptElementType.CHARACTER, "DANA", Alignment.CENTER),
            (ScriptElementType.CHARACTER, "דנה", Alignment.CENTER),
            (ScriptElementType.SUBHEADER, "Later", Alignment.LEFT),
            (ScriptElementType.SUBHEADER, "מאוחר יותר", Alignment.RIGHT),
        ],
    )
    def test_alignment_for(self, element_type, text, expected):
        assert alignment_for(element_type, text) is expected

    def test_position_x(self):
        assert position_x(Alignment.LEFT, 100, 612, 72) == 72
        assert position_x(Alignment.RIGHT, 100, 612, 72) == 440
        assert position_x(Alignment.CENTER, 100, 612, 72) == 256
        assert position_x(Alignment.CENTER, 100, 612) == 256
