from cfgkit.cli._application import Application, InputReader
from cfgkit.cli._main import main
