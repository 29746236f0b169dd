"""Editor modes and the manager dispatching keys between them."""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .insert_mode import InsertMode
from .mode_manager import ModeManager
from .normal_mode import NormalMode
from .prompt_mode import PromptMode

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeManager",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "PromptMode",
]
