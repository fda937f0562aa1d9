import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pythonjsonlogger import jsonlogger
from datetime import datetime, timezone, timedelta
from api.core.config import settings
from api.core.context import trace_id_var, client_ip_var

KST = timezone(timedelta(hours=9))

LOG_FORMAT = '%(@timestamp)s %(level)s %(mdc)s %(ip)s %(message)s'


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)

        # @timestamp - Asia/Seoul 타임존, 밀리초 단위
        if not log_record.get('@timestamp'):
            log_record['@timestamp'] = datetime.now(KST).strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + '+09:00'

        log_record['level'] = record.levelname

        # mdc 객체 안에 trace_id
        log_record['mdc'] = {"trace_id": trace_id_var.get()}

        log_record['ip'] = log_record.get('ip') or client_ip_var.get()

        # 불필요한 기본 필드 제거
        log_record.pop('timestamp', None)
        log_record.pop('color_message', None)


def _replace_file_handler(logger: logging.Logger, log_file: str):
    # 기존 파일 핸들러는 닫고 교체 (LOG_FILE 변경 반영)
    for handler in [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]:
        logger.removeHandler(handler)
        handler.close()

    if not log_file:
        return

    try:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
    except OSError:
        # 쓰기 불가 경로(로컬 개발 등)에서는 stdout만 사용
        logger.warning("LOG_FILE_UNAVAILABLE", extra={"log_file": log_file})
        return

    file_handler.setFormatter(CustomJsonFormatter(LOG_FORMAT))
    logger.addHandler(file_handler)


def configure_logger(logger: logging.Logger, level: str, log_file: str) -> logging.Logger:
    logger.setLevel(level.upper())
    _replace_file_handler(logger, log_file)
    return logger


def get_logger(name: str, level: str | None = None, log_file: str | None = None):
    logger = logging.getLogger(name)

    if not logger.handlers:
        # uvicorn 루트 로거로 중복 출력 방지
        logger.propagate = False

        # stdout → 컨테이너 로그 수집
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(CustomJsonFormatter(LOG_FORMAT))
        logger.addHandler(stream_handler)

        configure_logger(
            logger,
            level or settings.LOG_LEVEL,
            settings.LOG_FILE if log_file is None else log_file,
        )

    return logger


logger = get_logger("postgresql-kr-api")
