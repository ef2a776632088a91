import logging
from typing import Any, Dict

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(cfg: Dict[str, Any]) -> None:
    """Configure the root logger from the [logging] table; empty file -> stderr."""
    log_cfg = cfg.get("logging", {})
    level = getattr(logging, str(log_cfg.get("level", "INFO")).upper(), logging.INFO)
    filename = log_cfg.get("file") or None
    logging.basicConfig(filename=filename, level=level, format=FORMAT)


def log_usage(session_id: str, tool: str, inputs: Any, outputs: Any = None):
    logging.getLogger("usage").info(f"session={session_id} tool={tool} inputs={inputs} outputs={outputs}")
