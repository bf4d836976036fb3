from .api_exceptions import (
    ResourceNotFoundException,
    InvalidDataException,
    HandlerExecutionException,
    ServerConfigurationException,
    AuthenticationError,
    ExternalAPIError,
    register_exception_handlers,
)
from .logging_utils import get_hub_logger, sanitize_sensitive_data
