"""
Logging yapılandırması.
Kütüphane kendi başına handler eklemez; uygulama isterse setup_logging çağırır.
"""
import logging
import sys

from tapsilat.core.config import settings

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger("tapsilat").addHandler(logging.NullHandler())


def setup_logging(
    level: int | str | None = None,
    format_string: str | None = None,
) -> None:
    """
    Kök logger'a stdout handler'ı kurar ve "tapsilat" seviyesini ayarlar.
    level verilmezse TAPSILAT_LOG_LEVEL kullanılır. Diğer kütüphanelerin
    logger seviyelerine dokunulmaz.
    """
    if level is None:
        level = settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format=format_string or DEFAULT_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("tapsilat").setLevel(level)
