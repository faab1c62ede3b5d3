# employee_payroll/presentation/qt_user_interface.py

from PyQt5.QtWidgets import QWidget, QInputDialog, QMessageBox, QPlainTextEdit, QLineEdit

from typing import List, Optional

from employee_payroll.config import WINDOW_TITLE
import logging

logger = logging.getLogger(__name__)

class QtUserInterface:
    """UserInterface on top of PyQt5 modal dialogs and a read-only text area."""

    def __init__(self, parent: QWidget, display_area: QPlainTextEdit):
        self.parent = parent
        self.display_area = display_area

    def prompt_choice(self, title: str, options: List[str]) -> Optional[int]:
        logger.debug(f"Prompting choice '{title}' among {options}.")
        item, ok = QInputDialog.getItem(self.parent, WINDOW_TITLE, title, options, 0, False)
        if not ok:
            return None
        return options.index(item) if item in options else None

    def prompt_text(self, title: str) -> Optional[str]:
        logger.debug(f"Prompting text '{title}'.")
        text, ok = QInputDialog.getText(self.parent, WINDOW_TITLE, title, QLineEdit.EchoMode.Normal, "")
        return text if ok else None

    def show_message(self, text: str) -> None:
        QMessageBox.information(self.parent, WINDOW_TITLE, text)

    def render_text(self, full_text: str) -> None:
        self.display_area.setPlainText(full_text)
