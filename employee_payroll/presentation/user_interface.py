# employee_payroll/presentation/user_interface.py

from typing import List, Optional, Protocol

class UserInterface(Protocol):
    """
    What the payroll flows need from the windowing toolkit.

    Prompts return None when the user cancels them.
    """

    def prompt_choice(self, title: str, options: List[str]) -> Optional[int]:
        """Index of the chosen option, or None if cancelled."""
        ...

    def prompt_text(self, title: str) -> Optional[str]:
        ...

    def show_message(self, text: str) -> None:
        ...

    def render_text(self, full_text: str) -> None:
        """Replaces everything previously rendered with full_text."""
        ...
