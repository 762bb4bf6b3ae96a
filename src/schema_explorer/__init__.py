from schema_explorer.logger import ExplorerLogger, get_logger

__version__ = "0.1.0"

log: ExplorerLogger = get_logger("schema_explorer")
