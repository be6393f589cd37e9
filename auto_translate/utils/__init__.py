"""
Utility modules for the auto-translation pipeline
"""

# Config loader
from .config import (
    AutoTranslateSettings,
    QueueSettings,
    TranslatorSettings,
    LoggingSettings,
    ConfigLoader,
    get_config_loader,
    get_config,
    get_settings,
)

# Credentials
from .credentials import (
    ApiKeySource,
    StaticApiKeySource,
    EnvApiKeySource,
    SsmParameterApiKeySource,
    ChainedApiKeySource,
    api_key_source_from_settings,
)

# Logging & tracing
from .logging_setup import setup_logging
from .observability import (
    get_tracer,
    add_span_event,
    set_span_attribute,
    set_span_status,
    record_exception,
    trace_step,
)

from .slug import slugify

__all__ = [
    # Config loader
    "AutoTranslateSettings",
    "QueueSettings",
    "TranslatorSettings",
    "LoggingSettings",
    "ConfigLoader",
    "get_config_loader",
    "get_config",
    "get_settings",
    # Credentials
    "ApiKeySource",
    "StaticApiKeySource",
    "EnvApiKeySource",
    "SsmParameterApiKeySource",
    "ChainedApiKeySource",
    "api_key_source_from_settings",
    # Logging & tracing
    "setup_logging",
    "get_tracer",
    "add_span_event",
    "set_span_attribute",
    "set_span_status",
    "record_exception",
    "trace_step",
    # Text
    "slugify",
]
