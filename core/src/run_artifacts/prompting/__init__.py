from .fakes import PromptCall, ScriptedPrompter
from .rich_prompter import RichPrompter, parse_selection

__all__ = ["PromptCall", "ScriptedPrompter", "RichPrompter", "parse_selection"]
