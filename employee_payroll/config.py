# employee_payroll/config.py

import os
import logging

# --- Paths ---
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) # employee_payroll/ -> project root
LOGS_DIR = os.environ.get("EMPLOYEE_PAYROLL_LOG_DIR", os.path.join(BASE_DIR, "logs"))
LOG_FILE_NAME = "app.log"
LOG_FILE_PATH = os.path.join(LOGS_DIR, LOG_FILE_NAME)

# --- Logging Configuration ---
LOG_LEVEL = logging.DEBUG  # logging.INFO, logging.WARNING ... also fine
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s'

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': LOG_FORMAT,
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'level': LOG_LEVEL,
        },
        'file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'formatter': 'standard',
            'filename': LOG_FILE_PATH,
            'maxBytes': 1024*1024*5,  # 5 MB
            'backupCount': 5,
            'level': logging.INFO,
            'encoding': 'utf-8',
        },
    },
    'root': {
        'handlers': ['console', 'file'],
        'level': LOG_LEVEL,
    },
}

# --- Window Settings ---
WINDOW_TITLE = "Employee Payroll System"
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 500

# --- Payroll Settings ---
SALARY_DECIMAL_PLACES = 2


def ensure_logs_dir() -> str:
    """Creates the log directory if it doesn't exist and returns its path."""
    if not os.path.exists(LOGS_DIR):
        os.makedirs(LOGS_DIR)
    return LOGS_DIR
