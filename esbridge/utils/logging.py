import json
import logging
import sys
from datetime import datetime, timezone

from rich.logging import RichHandler


class StructuredLogger:
    """Logger that supports both human-readable (rich) and JSON line output."""

    def __init__(self, structured: bool = False, level: str = "INFO"):
        self.structured = structured
        self.level = getattr(logging, level.upper(), logging.INFO)

        if not self.structured:
            logging.basicConfig(
                level=self.level,
                format="%(message)s",
                datefmt="[%X]",
                handlers=[RichHandler(rich_tracebacks=True, markup=False, show_path=False)],
            )
        else:
            logging.basicConfig(level=self.level, format="%(message)s", stream=sys.stdout)

        self.logger = logging.getLogger("esbridge")
        self.logger.setLevel(self.level)

    def info(self, message: str, **kwargs):
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs):
        self._log("DEBUG", message, **kwargs)

    def _log(self, level: str, message: str, **kwargs):
        level_val = getattr(logging, level, logging.INFO)
        if level_val < self.level:
            return

        if self.structured:
            log_entry = {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "level": level,
                "message": str(message),
                **kwargs,
            }
            print(json.dumps(log_entry, default=str))
            return

        context_str = ""
        if kwargs:
            context_items = [f"{k}={v}" for k, v in kwargs.items()]
            context_str = f" ({', '.join(context_items)})"

        formatted_msg = f"{message}{context_str}"

        if level == "INFO":
            self.logger.info(formatted_msg)
        elif level == "WARNING":
            self.logger.warning(f"[WARN] {formatted_msg}")
        elif level == "ERROR":
            self.logger.error(f"[ERROR] {formatted_msg}")
        elif level == "DEBUG":
            self.logger.debug(f"[DEBUG] {formatted_msg}")


# Global instance, replaced by configure_logging
logger = StructuredLogger()


def configure_logging(structured: bool, level: str):
    """Configure the global logger."""
    global logger
    logger = StructuredLogger(structured=structured, level=level)
    return logger
