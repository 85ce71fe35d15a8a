from sf_utils.core.prompter.abc import Prompter
from sf_utils.core.prompter.real import ClickPrompter

__all__ = ["ClickPrompter", "Prompter"]
