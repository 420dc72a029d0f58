"""日志初始化 -- CLI 入口调用一次

structlog 事件与标准库日志（aiosqlite 等）统一经 root logger 输出到 stderr。
渲染模式与级别由调用方传入（见 config.get_log_format / get_log_level）。
"""

import logging
import sys

import structlog

# 第三方库 logger 的最低级别，避免逐条 SQL 调试日志淹没草稿事件
QUIET_LOGGERS: dict[str, int] = {"aiosqlite": logging.WARNING}


def _resolve_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def _build_renderer(log_format: str) -> list[structlog.types.Processor]:
    if log_format == "json":
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def setup_logging(log_format: str = "dev", log_level: str = "INFO") -> None:
    """配置 structlog 与 root logger

    Args:
        log_format: "json" 每行一个 JSON 对象；其余值使用控制台可读输出
        log_level: 标准库级别名（DEBUG / INFO / WARNING ...），无法识别时为 INFO
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_build_renderer(log_format),
            ],
            foreign_pre_chain=pre_chain,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(_resolve_level(log_level))

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)
