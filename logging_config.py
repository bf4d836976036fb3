# logging_config.py - Configuración de logs para consola y archivos

import logging
import logging.handlers
from pathlib import Path


def setup_logging(level: str = "INFO", log_dir: str = ""):
    """
    Configura el root logger:
    - Consola siempre habilitada
    - Si log_dir está definido, archivo rotativo diario (7 días) y archivo de errores
    """
    detailed_format = logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Limpiar handlers existentes
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s"
    ))
    console_handler.setLevel(level.upper())
    root_logger.addHandler(console_handler)

    if log_dir:
        logs_path = Path(log_dir)
        logs_path.mkdir(parents=True, exist_ok=True)

        rotating_handler = logging.handlers.TimedRotatingFileHandler(
            logs_path / "mcp_hub.log",
            when='midnight',
            interval=1,
            backupCount=7,
            encoding='utf-8'
        )
        rotating_handler.setFormatter(detailed_format)
        rotating_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(rotating_handler)

        error_handler = logging.FileHandler(
            logs_path / "errors.log",
            mode='a',
            encoding='utf-8'
        )
        error_handler.setFormatter(detailed_format)
        error_handler.setLevel(logging.ERROR)
        root_logger.addHandler(error_handler)

    # httpx loggea cada request en INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    root_logger.info(
        "Logging configured | level=%s | log_dir=%s", level.upper(), log_dir or "console-only"
    )
