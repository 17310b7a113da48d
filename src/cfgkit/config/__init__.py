from cfgkit.config._config import Config
