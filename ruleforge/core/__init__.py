# Core module exports
from ruleforge.core.config import settings, get_settings
from ruleforge.core.logging import (
    configure_logging,
    configure_from_settings,
    get_logger,
    bind_context,
    clear_context,
    registry_logger,
    compiler_logger,
    validator_logger,
)
