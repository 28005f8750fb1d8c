"""
structlog 기반 로깅 설정

- 개발 환경: 컬러 콘솔 출력
- 프로덕션 환경: JSON 출력, 연락처/키 마스킹
- 요청 컨텍스트 자동 주입: request_id, session_id
- 이력서 본문 같은 긴 값은 잘라서 기록
"""

import logging
import re
import sys

import structlog

from app.core.config import settings
from app.core.context import get_request_id, get_session_id

LOG_VALUE_MAX_LENGTH = 500

SENSITIVE_PATTERNS = [
    (re.compile(r"(Bearer\s+)[^\s]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(api[_-]?key=)[^&\s]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+"), "***@***"),
    (
        re.compile(r"(?<![\w-])(?:\+\d{1,3}[\s.-]?)?(?:\(\d{2,4}\)|\d{2,4})[\s.-]?\d{3,4}[\s.-]?\d{4}(?![\w-])"),
        "***-****",
    ),
]

# 구조 필드는 마스킹 대상이 아님
UNMASKED_KEYS = frozenset({"timestamp", "level", "logger", "request_id", "session_id"})

QUIET_LOGGERS = (
    "httpcore",
    "httpx",
    "langfuse",
    "langchain",
    "langgraph",
    "openai",
    "google_genai",
    "anyio",
)


def _mask(value: str) -> str:
    for pattern, replacement in SENSITIVE_PATTERNS:
        value = pattern.sub(replacement, value)
    return value


def add_context_processor(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """contextvars의 request_id / session_id 주입"""
    for key, value in (("request_id", get_request_id()), ("session_id", get_session_id())):
        if value:
            event_dict.setdefault(key, value)
    return event_dict


def truncate_long_values_processor(
    logger: logging.Logger, method_name: str, event_dict: dict
) -> dict:
    for key, value in event_dict.items():
        if isinstance(value, str) and len(value) > LOG_VALUE_MAX_LENGTH:
            event_dict[key] = f"{value[:LOG_VALUE_MAX_LENGTH]}...(+{len(value) - LOG_VALUE_MAX_LENGTH})"
    return event_dict


def mask_sensitive_processor(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """프로덕션에서 이력서 연락처와 인증 정보 마스킹"""
    if not settings.is_production:
        return event_dict

    for key, value in event_dict.items():
        if key not in UNMASKED_KEYS and isinstance(value, str):
            event_dict[key] = _mask(value)
    return event_dict


def _shared_processors() -> list:
    processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        add_context_processor,
        truncate_long_values_processor,
        mask_sensitive_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if settings.is_production:
        processors.append(structlog.processors.format_exc_info)
    return processors


def setup_logging(level: str | None = None) -> None:
    """structlog와 표준 logging을 같은 포맷터로 묶는다"""
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    shared_processors = _shared_processors()

    if settings.is_production:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # uvicorn 로그도 루트 핸들러로 흘려보냄
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers.clear()

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
