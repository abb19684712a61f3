import logging
import logging.config
import os


def setup_logging(log_dir=None):
    log_dir = log_dir or os.getenv("LOG_DIR", "logs")
    # 로그 디렉토리 생성
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    log_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": "DEBUG",
            },
            "file": {
                "class": "logging.handlers.TimedRotatingFileHandler",
                "formatter": "default",
                "level": "INFO",
                "filename": os.path.join(log_dir, "pharmacy.log"),
                "when": "midnight",
                "interval": 1,
                "backupCount": 7,
                "encoding": "utf-8",
            },
        },
        "loggers": {
            "api": {"level": "INFO"},
            "pharmacy": {"level": "DEBUG"},
            "service": {"level": "DEBUG"},
            # httpx 는 요청 URL 전체(ServiceKey 포함)를 INFO 로 남긴다
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
        "root": {
            "handlers": ["console", "file"],
            "level": "INFO",
        }
    }

    logging.config.dictConfig(log_config)
    logging.info("Logging is set up.")
