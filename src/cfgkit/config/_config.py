from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields

from cfgkit.logging import Logger

@dataclass
class Config:
    # Directory the component logs are written to.
    log_dir: str = "./logs/"

    # One of debug, info, error, off.
    log_level: str = "info"

    # Ends each list read by the interactive front-end.
    input_separator: str = "^"

    # Right hand side token standing for the empty production.
    epsilon_token: str = "<eps>"

    def __post_init__(self):
        if len(self.input_separator) != 1 or self.input_separator.isspace():
            raise ValueError(f"input_separator must be a single character, got '{self.input_separator}'")
        if not self.epsilon_token or any(c.isspace() for c in self.epsilon_token):
            raise ValueError(f"epsilon_token must be a single token, got '{self.epsilon_token}'")

        if not Logger.is_valid_level(self.log_level):
            raise ValueError(f"unknown log level '{self.log_level}'")

    @classmethod
    def load(cls, filename: str) -> Config:
        with open(filename, 'rb') as f:
            data = tomllib.load(f)

        known = {f.name for f in fields(cls)}
        unknown = [key for key in data if key not in known]
        if unknown:
            raise ValueError(f"unknown config keys in {filename}: {', '.join(sorted(unknown))}")
        return cls(**data)

    def apply(self) -> Config:
        Logger.log_dir = self.log_dir
        Logger.default_level = self.log_level
        return self
