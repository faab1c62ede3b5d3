# employee_payroll/presentation/main_window.py

from PyQt5.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                             QPushButton, QPlainTextEdit)

from employee_payroll.app_context import ApplicationContext
from employee_payroll.config import WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT
from employee_payroll.presentation.payroll_flows import PayrollFlows
from employee_payroll.presentation.qt_user_interface import QtUserInterface
import logging

logger = logging.getLogger(__name__)

class MainWindow(QMainWindow):
    def __init__(self, context: ApplicationContext, parent=None):
        super().__init__(parent)
        self.context = context
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self._setup_ui()
        self.flows = PayrollFlows(context, QtUserInterface(self, self.display_area))
        self._connect_signals()
        logger.info("MainWindow initialized and UI setup complete.")

    def _setup_ui(self):
        central = QWidget(self)
        main_layout = QVBoxLayout(central)

        button_layout = QHBoxLayout()
        self.add_button = QPushButton("Add Employee")
        self.remove_button = QPushButton("Remove Employee")
        self.display_button = QPushButton("Display Employees")
        button_layout.addStretch()
        button_layout.addWidget(self.add_button)
        button_layout.addWidget(self.remove_button)
        button_layout.addWidget(self.display_button)
        button_layout.addStretch()
        main_layout.addLayout(button_layout)

        self.display_area = QPlainTextEdit(self)
        self.display_area.setReadOnly(True) # QPlainTextEdit scrolls on its own
        main_layout.addWidget(self.display_area)

        self.setCentralWidget(central)

    def _connect_signals(self):
        # clicked passes a 'checked' bool, so the flows are wrapped
        self.add_button.clicked.connect(lambda: self.flows.add_employee())
        self.remove_button.clicked.connect(lambda: self.flows.remove_employee())
        self.display_button.clicked.connect(lambda: self.flows.display_employees())

    def closeEvent(self, event):
        self.context.close()
        super().closeEvent(event)
