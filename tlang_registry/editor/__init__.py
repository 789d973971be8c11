"""Helpers shared with the visual editor's property panel."""

from .property_values import InputValue, decode_input_value

__all__ = ["InputValue", "decode_input_value"]
