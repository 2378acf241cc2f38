import logging, json
from datetime import datetime, timezone

logger = logging.getLogger("lease_renewer")
logger.setLevel(logging.INFO)
if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(_handler)

def configure(level: str):
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

def jlog(level: str, msg: str, **fields):
    if not logger.isEnabledFor(getattr(logging, level.upper())):
        return
    rec = {"ts": datetime.now(timezone.utc).isoformat(), "level": level, "msg": msg, **fields}
    getattr(logger, level)(json.dumps(rec, ensure_ascii=False, default=str))
