from __future__ import annotations

import pathlib
from datetime import datetime

levels_mapping = {
    "debug": 0,
    "info": 1,
    "error": 2,
    "off": 3,
}

class Logger():
    log_dir = "./logs/"

    # level used by components that are not running in debug mode; the
    # command line front-end raises it through Config.apply()
    default_level = "off"

    # log directories already created by this process
    _created_dirs: set[pathlib.Path] = set()

    def __init__(self, file: str, tag: str, log_level: str = "info") -> None:
        self.log_level = log_level
        self.file = file
        self.tag = tag

    @classmethod
    def for_component(cls, file: str, tag: str, debug: bool = False) -> Logger:
        return Logger(file=file, tag=tag, log_level="debug" if debug else cls.default_level)

    def _line_header(self, level: str) -> str:
        date = datetime.now().strftime("[%d/%m %H:%M:%S]")
        return f"{date}, {level}, {self.tag}: "

    def _path_for(self, suffix: str = "") -> pathlib.Path:
        log_dir = pathlib.Path(self.log_dir)
        if log_dir not in Logger._created_dirs:
            log_dir.mkdir(parents=True, exist_ok=True)
            Logger._created_dirs.add(log_dir)
        return log_dir / f"{self.file}{suffix}.log"

    def _log(self, msg: str, level: str) -> None:
        with open(self._path_for(), 'a') as f:
            f.write(self._line_header(level) + msg + "\n")

    def log(self, msg: str):
        if self.should_log_at_level("info"):
            self._log(msg, "INF")

    def log_error(self, msg: str):
        if self.should_log_at_level("error"):
            self._log(msg, "ERR")
            with open(self._path_for("_err"), 'a') as f:
                f.write(self._line_header("ERR") + msg + "\n")

    def log_debug(self, msg: str):
        if self.should_log_at_level("debug"):
            self._log(msg, "DEB")

    def raise_exception(self, msg: str, exception_type: type[Exception] = Exception):
        self.log_error(msg)
        raise exception_type(msg)

    @classmethod
    def is_valid_level(cls, level: str) -> bool:
        return level in levels_mapping

    @classmethod
    def _log_level_to_int(cls, level: str):
        if not cls.is_valid_level(level):
            raise ValueError(f"unknown log level '{level}'")
        return levels_mapping[level]

    def should_log_at_level(self, level_of_message: str):
        return self._log_level_to_int(level_of_message) >= self._log_level_to_int(self.log_level)
