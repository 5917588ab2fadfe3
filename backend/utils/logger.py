# 日志初始化
import logging

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

def setup_logger(level: str = "INFO", enabled: bool = True):
    """
    配置根 logger。
    :param level: 日志级别名称，如 INFO / DEBUG。
    :param enabled: 为 False 时关闭所有日志输出。
    """
    if not enabled:
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
