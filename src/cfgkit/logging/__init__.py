from cfgkit.logging._logger import Logger
