"""
Core module - Contains configuration, errors, logging and crypto primitives.
"""

from credguard.core.config import CredGuardConfig, SecurityPolicy, PasswordPolicy
from credguard.core.logging import configure_logging, get_secure_logger, SecureLogFilter

__all__ = ["CredGuardConfig", "SecurityPolicy", "PasswordPolicy", "configure_logging", "get_secure_logger", "SecureLogFilter"]
