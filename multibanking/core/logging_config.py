import logging
import sys
from pathlib import Path
from typing import Optional

from .config import Settings, settings


def setup_logging(config: Optional[Settings] = None) -> None:
    """Настройка логирования для всего пакета"""

    config = config or settings
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if config.log_file:
        # Создаём папку для лога, если её нет
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=log_level,
        format=config.log_format,
        handlers=handlers,
        force=True,
    )

    logging.getLogger("multibanking").setLevel(log_level)
