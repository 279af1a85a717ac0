from .logger import ROOT_LOGGER_NAME, get_logger, get_root_logger, logger_set_up
