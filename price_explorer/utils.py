import os
import json
import datetime as dt
import logging
from html import escape
from logging.handlers import TimedRotatingFileHandler
from jsonschema import validate, Draft202012Validator
from jsonschema.exceptions import ValidationError
from email.utils import parsedate_to_datetime
from typing import Optional

# ---------- Time helpers ----------

def parse_datetime_safe(raw: Optional[str]) -> Optional[dt.datetime]:
    """Best-effort parsing for record timestamps.

    Accepts plain dates (``2024-05-01``), ISO 8601 datetimes and RFC 2822 strings.
    Returns a timezone-aware UTC datetime on success, otherwise ``None``.
    """

    if not raw:
        return None

    raw = raw.strip()

    # Fast path: ISO 8601 (with optional trailing Z and fractional seconds)
    iso_candidate = raw
    if raw.endswith("Z"):
        iso_candidate = raw[:-1] + "+00:00"

    try:
        dt_obj = dt.datetime.fromisoformat(iso_candidate)
        if dt_obj.tzinfo is None:
            dt_obj = dt_obj.replace(tzinfo=dt.timezone.utc)
        return dt_obj.astimezone(dt.timezone.utc)
    except ValueError:
        pass

    # RFC 2822 / email style timestamps
    try:
        dt_obj = parsedate_to_datetime(raw)
        if dt_obj:
            if dt_obj.tzinfo is None:
                dt_obj = dt_obj.replace(tzinfo=dt.timezone.utc)
            return dt_obj.astimezone(dt.timezone.utc)
    except (TypeError, ValueError):
        pass

    for fmt in ("%d.%m.%Y", "%Y/%m/%d"):
        try:
            dt_obj = dt.datetime.strptime(raw, fmt)
            return dt_obj.replace(tzinfo=dt.timezone.utc)
        except ValueError:
            continue

    return None

# ---------- Config validation ----------

def load_file(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()

def validate_config(cfg: dict):
    here = os.path.dirname(os.path.abspath(__file__))
    schema_path = os.path.join(here, "schemas", "config.schema.json")
    schema = json.loads(load_file(schema_path))
    try:
        validate(instance=cfg, schema=schema, cls=Draft202012Validator)
    except ValidationError as e:
        raise ValueError(f"Config validation error: {e.message} at {list(e.path)}") from e

# ---------- Output writer ----------

def write_output(human_md: str, json_obj: dict, out_cfg: dict):
    out_dir = out_cfg["dir"]
    formats = out_cfg["formats"]
    os.makedirs(out_dir, exist_ok=True)
    now_local = dt.datetime.now().astimezone()
    ts = now_local.strftime("%Y%m%dT%H%M%S%z")
    base = os.path.join(out_dir, f"prices_{ts}")

    generated_files = []

    if "md" in formats:
        md_path = base + ".md"
        with open(md_path, "w", encoding="utf-8") as f:
            f.write(human_md)
        generated_files.append(md_path)

    if "json" in formats:
        json_path = base + ".json"
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(json_obj, f, ensure_ascii=False, indent=2)
        generated_files.append(json_path)

    if "html" in formats:
        html = f"""<!DOCTYPE html>
<html><head><meta charset="utf-8"><title>{escape(json_obj.get('title', 'Prices'))}</title></head>
<body><pre>
{escape(human_md)}
</pre></body></html>"""
        html_path = base + ".html"
        with open(html_path, "w", encoding="utf-8") as f:
            f.write(html)
        generated_files.append(html_path)

    return generated_files

# ---------- Logging ----------

_LOGGER_INITIALIZED = False

class JsonFormatter(logging.Formatter):
    def format(self, record):
        ts = dt.datetime.fromtimestamp(record.created, tz=dt.timezone.utc)
        payload = {
            "ts": ts.isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

def _build_logger():
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    # Default to a local, writable logs directory
    log_dir = os.getenv("LOG_DIR", "logs")
    json_mode = os.getenv("LOG_JSON", "false").lower() == "true"

    os.makedirs(log_dir, exist_ok=True)
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level, logging.INFO))

    ch = logging.StreamHandler()
    ch.setLevel(logger.level)

    fh = TimedRotatingFileHandler(os.path.join(log_dir, "price-explorer.log"), when="D", backupCount=7, encoding="utf-8")
    fh.setLevel(logger.level)

    if json_mode:
        fmt = JsonFormatter()
    else:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    ch.setFormatter(fmt)
    fh.setFormatter(fmt)
    logger.addHandler(ch)
    logger.addHandler(fh)

    _LOGGER_INITIALIZED = True

def get_logger(name: str = None) -> logging.Logger:
    _build_logger()
    return logging.getLogger(name if name else __name__)
