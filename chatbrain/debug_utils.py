import logging
import os

logger = logging.getLogger("chatbrain")

DEFAULT_LOG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'chatbrain_debug.log')

def setup_logging(log_file=None, level=logging.DEBUG):
    """Configure logging to file. Called once by the app entry point."""
    logging.basicConfig(filename=log_file or DEFAULT_LOG_FILE, level=level,
                        format='%(asctime)s - %(threadName)s - %(levelname)s - %(message)s', filemode='w')

def log_debug(msg):
    logger.debug(msg)

def log_info(msg):
    logger.info(msg)
    # Also print to console for terminal visibility
    print(f"[INFO] {msg}")

def log_error(msg):
    logger.error(msg)
    print(f"[ERROR] {msg}")
