class StatsdError(Exception):
    """statsdsend error"""


class ConfigError(StatsdError, ValueError):
    """Invalid statsd configuration"""
