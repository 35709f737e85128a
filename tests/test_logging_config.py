from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from loguru import logger

from processor.logging_config import setup_logging


def test_setup_logging_writes_daily_file(tmp_path):
    target = setup_logging(level="WARNING", log_dir=tmp_path / "logs")
    try:
        logger.debug("[test] debug line reaches the file sink")
        logger.complete()
        files = list(target.glob("rpmscope_*.log"))
        assert target == tmp_path / "logs"
        assert len(files) == 1
        assert "debug line reaches the file sink" in files[0].read_text(encoding="utf-8")
    finally:
        logger.remove()
        logger.add(sys.stderr)
