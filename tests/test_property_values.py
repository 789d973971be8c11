"""Tests for decoding values typed into the properties panel."""

import pytest

from tlang_registry.editor import InputValue, decode_input_value


class TestDecodeInputValue:
    @pytest.mark.parametrize(
        "text, value",
        [
            ("42", 42),
            ("1.5", 1.5),
            ("true", True),
            ("null", None),
            ("[1, 2]", [1, 2]),
            ('{"a": 1}', {"a": 1}),
            ('"quoted"', "quoted"),
        ],
    )
    def test_structured(self, text, value):
        assert decode_input_value(text) == InputValue(value=value, structured=True)

    @pytest.mark.parametrize("text", ["hello", "", "{a: 1}", "NaN", "Infinity", "[1,"])
    def test_raw_string_fallback(self, text):
        assert decode_input_value(text) == InputValue(value=text, structured=False)
