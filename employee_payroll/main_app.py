# employee_payroll/main_app.py
import sys
import logging
import logging.config
from PyQt5.QtWidgets import QApplication, QMessageBox

from employee_payroll.config import LOGGING_CONFIG, ensure_logs_dir
from employee_payroll.app_context import create_application_context
from employee_payroll.presentation.main_window import MainWindow

logger = logging.getLogger(__name__)

def configure_logging():
    ensure_logs_dir()
    logging.config.dictConfig(LOGGING_CONFIG)

def main():
    configure_logging()
    logger.info("Application starting...")
    app = QApplication(sys.argv)

    context = create_application_context()
    try:
        main_window = MainWindow(context)
    except Exception as e:
        logger.error(f"FATAL: Could not build the main window: {e}", exc_info=True)
        QMessageBox.critical(None, "Startup Error", f"Could not start the application: {e}")
        sys.exit(1)

    main_window.show()
    logger.info("Application started successfully. Main window shown.")
    sys.exit(app.exec_())

if __name__ == '__main__':
    main()
