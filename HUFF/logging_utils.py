import logging
import os
from datetime import datetime
from typing import Optional

from bitstream import DEBUG_LOW, DEBUG_HIGH

FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

def level_for_debug(debug: int) -> int:
    if debug >= DEBUG_HIGH:
        return logging.DEBUG
    if debug >= DEBUG_LOW:
        return logging.INFO
    return logging.WARNING

def setup_logging(name: str = __name__, debug: int = 0, log_dir: Optional[str] = None) -> logging.Logger:
    if not logging.getLogger().handlers:
        handlers = [logging.StreamHandler()]
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            handlers.append(logging.FileHandler(os.path.join(log_dir, f"run_{timestamp}.log")))
        logging.basicConfig(level=level_for_debug(debug), format=FORMAT, handlers=handlers)
    return logging.getLogger(name)
