
import logging
import os
from datetime import datetime

def setup_logger(name, log_dir=None):
    """
    Basic Custom Logging formatting and handling

    Parameters
    name (str) : Name of the logger 
    log_dir (str) : Folder for the daily log file. Defaults to $CIVIC_LOG_DIR or 'logs'

    Returns:
    logging.Logger : Configured Logger Instance
    """

    logger = logging.getLogger(name)
    if logger.handlers:
        # already configured by an earlier import
        return logger

    log_dir = log_dir or os.getenv('CIVIC_LOG_DIR', 'logs')
    os.makedirs(log_dir, exist_ok=True)

    logger.setLevel(logging.DEBUG)

    # Configs for how logs will appear in logs/
    file_format = logging.Formatter(
        '%(levelname)s : %(name)s : %(funcName)s : %(lineno)d : %(message)s'
    )

    log_file = os.path.join(log_dir, f'civic_reports_{datetime.now().strftime("%m%d%Y")}')
    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(file_format)

    # Console logs configs
    console_format = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s'
    )
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(console_format)


    # Add the config to the Logger obj
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger
