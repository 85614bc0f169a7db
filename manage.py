#!/usr/bin/env python3
"""
Employee Form Service — Management Tool

Single entry point for running and maintaining the backend.
Usage: python manage.py <command> [options]
"""

import json
import logging
import os
import subprocess
import sys
from datetime import datetime
from typing import List


# ═══════════════════════════════════════════════════════════
#  Logging Setup
# ═══════════════════════════════════════════════════════════

class ColorFormatter(logging.Formatter):
    """Console formatter with ANSI colors and level symbols."""

    COLORS = {
        "INFO": "\033[96m",        # Cyan
        "SUCCESS": "\033[92m",     # Green
        "WARNING": "\033[93m",     # Yellow
        "ERROR": "\033[91m",       # Red
        "CRITICAL": "\033[91m\033[1m",  # Bold Red
        "DEBUG": "\033[94m",       # Blue
        "HEADER": "\033[95m",      # Magenta
        "BOLD": "\033[1m",
        "RESET": "\033[0m",
    }

    SYMBOLS = {
        "INFO": "→",
        "SUCCESS": "✓",
        "WARNING": "⚠",
        "ERROR": "✗",
        "CRITICAL": "☠",
        "DEBUG": "•",
        "STEP": "▶",
    }

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and sys.platform != "win32"

    def _colorize(self, text: str, color_name: str) -> str:
        if not self.use_colors:
            return text
        color = self.COLORS.get(color_name, "")
        return f"{color}{text}{self.COLORS['RESET']}" if color else text

    def format(self, record: logging.LogRecord) -> str:
        msg = str(record.msg)

        # Detect custom markers in the message
        if "[SUCCESS]" in msg:
            symbol, color = self.SYMBOLS["SUCCESS"], "SUCCESS"
        elif "[WARNING]" in msg:
            symbol, color = self.SYMBOLS["WARNING"], "WARNING"
        elif "[ERROR]" in msg:
            symbol, color = self.SYMBOLS["ERROR"], "ERROR"
        elif "[STEP]" in msg:
            symbol, color = self.SYMBOLS["STEP"], "INFO"
        else:
            symbol, color = self.SYMBOLS.get(record.levelname, ""), record.levelname

        if symbol and not msg.startswith(("===", " ")):
            record.msg = f"{symbol} {msg}"

        if self.use_colors:
            if msg.startswith("==="):
                record.msg = self._colorize(str(record.msg), "HEADER")
            else:
                record.msg = self._colorize(str(record.msg), color)

        return super().format(record)


# --- Bootstrap logger --------------------------------------------------------
_log_dir = "logs"
os.makedirs(_log_dir, exist_ok=True)
_log_file = os.path.join(_log_dir, f"manage-{datetime.now():%Y%m%d}.log")

_file_handler = logging.FileHandler(_log_file, encoding="utf-8")
_file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))

_console_handler = logging.StreamHandler()
_console_handler.setFormatter(ColorFormatter())

logging.basicConfig(level=logging.INFO, handlers=[_file_handler, _console_handler])
logger = logging.getLogger("manage")

BACKEND_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "backend")


# ═══════════════════════════════════════════════════════════
#  Service Manager
# ═══════════════════════════════════════════════════════════

class ServiceManager:
    """Runs, initialises and probes the form service."""

    def __init__(self, host: str | None = None, port: int | None = None):
        from forms_api.core.config import settings

        self.settings = settings
        self.host = host or settings.HOST
        self.port = port or settings.PORT

    @property
    def base_url(self) -> str:
        host = "localhost" if self.host in ("0.0.0.0", "::") else self.host
        return f"http://{host}:{self.port}"

    # ─── Helpers ──────────────────────────────────────────
    def _run(self, cmd: List[str], cwd: str | None = None) -> subprocess.CompletedProcess:
        logger.info(f"[STEP] Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, check=True, text=True, capture_output=True, cwd=cwd)
            for line in result.stdout.strip().splitlines():
                if line.strip():
                    logger.info(f"  {line.strip()}")
            return result
        except subprocess.CalledProcessError as exc:
            logger.error(f"Command failed (exit {exc.returncode})")
            if exc.stderr:
                logger.error(f"  {exc.stderr.strip()}")
            raise

    # ─── Core Commands ────────────────────────────────────
    def serve(self, reload: bool = False) -> None:
        """Run the API under uvicorn in the foreground (Ctrl-C to stop)."""
        import uvicorn

        logger.info(f"\n=== Starting Form Service ({self.settings.APP_ENV}) ===")
        self.urls()
        uvicorn.run(
            "forms_api.main:app",
            host=self.host,
            port=self.port,
            reload=reload,
            log_level="debug" if self.settings.APP_ENV == "development" else "info",
        )

    def init_db(self) -> None:
        """Create the submissions table if it does not exist."""
        import asyncio

        from forms_api.db.session import engine, init_models

        async def _init() -> None:
            await init_models()
            await engine.dispose()

        logger.info("\n=== Database Initialisation ===")
        logger.info(f"[STEP] Creating tables in {self.settings.DATABASE_PATH}…")
        asyncio.run(_init())
        logger.info("[SUCCESS] Database ready!")

    def seed(self) -> None:
        """Run the seed script from the backend directory."""
        logger.info("\n=== Seeding Database ===")
        logger.info("[STEP] Inserting demo submissions…")
        self._run([sys.executable, "-m", "scripts.seed_submissions"], cwd=BACKEND_DIR)
        logger.info("[SUCCESS] Seed data inserted!")

    def status(self) -> None:
        """Probe the running service's health endpoint."""
        import urllib.request

        logger.info("\n=== Service Status ===")
        try:
            resp = urllib.request.urlopen(f"{self.base_url}/health", timeout=10)
            data = json.loads(resp.read().decode())
            logger.info(f"[SUCCESS] Backend: status={data.get('status')} env={data.get('env')}")
        except OSError as exc:
            logger.error(f"[ERROR] Backend health check failed: {exc}")

    def urls(self) -> None:
        """Print access URLs for the service."""
        prefix = self.settings.API_PREFIX
        logger.info("\n=== Access URLs ===")
        logger.info(f"🔧  Backend API:       {self.base_url}")
        logger.info(f"📖  Swagger Docs:      {self.base_url}/docs")
        logger.info(f"❤️   Health Check:      {self.base_url}/health")
        logger.info(f"📝  Form Schema:       {self.base_url}{prefix}/form-schema")
        logger.info(f"📋  Submissions:       {self.base_url}{prefix}/submissions")


# ═══════════════════════════════════════════════════════════
#  CLI
# ═══════════════════════════════════════════════════════════

USAGE = f"""
{ColorFormatter.COLORS['HEADER']}Employee Form Service — Management{ColorFormatter.COLORS['RESET']}
{'═' * 50}

{ColorFormatter.COLORS['BOLD']}Usage:{ColorFormatter.COLORS['RESET']} python manage.py <command> [options]

{ColorFormatter.COLORS['BOLD']}Commands:{ColorFormatter.COLORS['RESET']}
    {ColorFormatter.COLORS['INFO']}serve{ColorFormatter.COLORS['RESET']}           Run the API (--reload for autoreload)
    {ColorFormatter.COLORS['INFO']}init-db{ColorFormatter.COLORS['RESET']}         Create the submissions table
    {ColorFormatter.COLORS['INFO']}seed{ColorFormatter.COLORS['RESET']}            Insert demo submissions
    {ColorFormatter.COLORS['INFO']}status{ColorFormatter.COLORS['RESET']}          Probe the running service
    {ColorFormatter.COLORS['INFO']}urls{ColorFormatter.COLORS['RESET']}            Show access URLs

{ColorFormatter.COLORS['BOLD']}Options:{ColorFormatter.COLORS['RESET']}
    --host=HOST     Bind / probe host (default from HOST setting)
    --port=PORT     Bind / probe port (default from PORT setting)
    --reload        Restart the server on code changes

{ColorFormatter.COLORS['BOLD']}Examples:{ColorFormatter.COLORS['RESET']}
    python manage.py init-db
    python manage.py seed
    python manage.py serve --port=5000 --reload
"""


def main() -> None:
    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        print(USAGE)
        sys.exit(0)

    command = sys.argv[1]
    opts = sys.argv[2:]

    host = None
    port = None
    for o in opts:
        if o.startswith("--host="):
            host = o.split("=", 1)[1]
        elif o.startswith("--port="):
            port = int(o.split("=", 1)[1])

    mgr = ServiceManager(host=host, port=port)

    try:
        if command == "serve":
            mgr.serve(reload="--reload" in opts)
        elif command == "init-db":
            mgr.init_db()
        elif command == "seed":
            mgr.seed()
        elif command == "status":
            mgr.status()
        elif command == "urls":
            mgr.urls()
        else:
            logger.error(f"Unknown command: {command}")
            print(USAGE)
            sys.exit(1)
    except Exception as exc:
        logger.error(f"Operation failed: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
