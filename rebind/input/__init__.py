"""Binding tables, mouse resolution and the translator runtime."""

from rebind.input.bindings import BindingTable, DenseBindingTable
from rebind.input.builder import TranslatorBuilder
from rebind.input.mouse import MouseMode, MouseSettings
from rebind.input.rebind import MAX_BINDINGS_PER_ACTION, InputRebind
from rebind.input.translator import Translator

__all__ = [
    "MAX_BINDINGS_PER_ACTION",
    "BindingTable",
    "DenseBindingTable",
    "InputRebind",
    "MouseMode",
    "MouseSettings",
    "Translator",
    "TranslatorBuilder",
]
