import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from hubspot_mcp.config.settings import settings


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = record.getMessage()
        if settings.log_redact_content:
            msg = (msg or "")[:64]
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "msg": msg,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logger(name: str = "hubspot_mcp") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(settings.log_level)
    # stdout 留给 stdio 传输，控制台日志只写 stderr
    if logger.handlers:
        return logger
    log_dir = Path(settings.log_dir)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / "server.log", encoding="utf-8")
    except OSError as e:
        # 只读目录下启动时退化为仅 stderr 输出
        print(f"hubspot_mcp: file logging disabled ({e})", file=sys.stderr)
    else:
        fh.setFormatter(JsonFormatter())
        logger.addHandler(fh)

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(logging.WARNING)
    sh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(sh)
    logger.propagate = False
    return logger


logger = setup_logger()
