# ============================================================================
# ENVIRONMENT VARIABLE VALIDATION
# ============================================================================
# STATUS: Configuration - Startup check of the variables config/ reads
# PURPOSE: Report malformed settings before the first certificate is assembled
# ============================================================================
"""
Environment Variable Validation.

Each variable read by config/ has a rule: a regex for its format, whether
it must be set, and the default used when it is not. Validation returns a
list of findings instead of raising, so a host can decide whether to
refuse startup (errors) or just report (warnings).

Findings:
    error:   set but malformed, or required and missing
    warning: not set, default applies (only for rules with warn_when_unset)

Usage:
    from config.env_validation import validate_environment

    for finding in validate_environment():
        print(f"{finding.var_name}: {finding.message}")

Exports:
    ENV_VAR_RULES: Rule per variable name
    EnvVarRule: One validation rule
    EnvValidationError: One finding
    validate_single_var: Check one variable
    validate_environment: Check all variables
    get_validation_summary: Findings grouped for a health endpoint
    log_validation_results: Log findings and report success
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Pattern, Any

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

_MASK = "***MASKED***"
_SENSITIVE_MARKERS = ("key", "secret", "token", "password")
_MAX_SHOWN_LENGTH = 30


# ============================================================================
# RULES AND FINDINGS
# ============================================================================

@dataclass(frozen=True)
class EnvVarRule:
    """
    Format rule for one environment variable.

    Attributes:
        pattern: Regex the value must match
        description: Expected format in words
        example: A valid value
        required: Missing value is an error
        default: Value config/ falls back to when unset
        warn_when_unset: Report a warning when the default applies
    """
    pattern: Pattern
    description: str
    example: str
    required: bool = False
    default: Optional[str] = None
    warn_when_unset: bool = True


@dataclass
class EnvValidationError:
    """A validation finding (severity 'error' or 'warning')."""
    var_name: str
    message: str
    current_value: Optional[str]
    expected: str
    severity: str = SEVERITY_ERROR

    def display_value(self) -> Optional[str]:
        """Value safe to show: secrets masked, long values shortened."""
        if self.current_value is None:
            return None
        if any(marker in self.var_name.lower() for marker in _SENSITIVE_MARKERS):
            return _MASK
        if len(self.current_value) > _MAX_SHOWN_LENGTH:
            return f"{self.current_value[:20]}...({len(self.current_value)} chars)"
        return self.current_value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "var_name": self.var_name,
            "message": self.message,
            "current_value": self.display_value(),
            "expected": self.expected,
            "severity": self.severity,
        }


_HTTPS_URL = re.compile(r"^https://[a-z0-9][a-z0-9.-]+\.[a-z]{2,}(/.*)?$", re.IGNORECASE)
_POSITIVE_INT = re.compile(r"^[1-9][0-9]*$")
_BOOLEAN = re.compile(r"^(true|false|1|0|yes|no)$", re.IGNORECASE)


ENV_VAR_RULES: Dict[str, EnvVarRule] = {
    # Certificate numbering
    "SPPTG_KODE_KABUPATEN": EnvVarRule(
        pattern=re.compile(r"^[0-9]+(\.[0-9]+)*$"),
        description="Regency code as dotted digits",
        example="12.34",
        default="00.00",
    ),

    # Static map image service
    "GOOGLE_MAPS_API_KEY": EnvVarRule(
        pattern=re.compile(r"^[A-Za-z0-9_-]{20,}$"),
        description="Maps API key (20+ letters, digits, '_' or '-'); unset means no map image",
        example="AIzaSyA-example-key-000000",
        warn_when_unset=False,
    ),
    "STATIC_MAP_BASE_URL": EnvVarRule(
        pattern=_HTTPS_URL,
        description="HTTPS URL of the static map endpoint",
        example="https://maps.googleapis.com/maps/api/staticmap",
        default="https://maps.googleapis.com/maps/api/staticmap",
        warn_when_unset=False,
    ),
    "STATIC_MAP_PATH_ENCODING": EnvVarRule(
        pattern=re.compile(r"^(path|polyline)$", re.IGNORECASE),
        description="'path' or 'polyline'",
        example="polyline",
        default="path",
        warn_when_unset=False,
    ),
    "STATIC_MAP_TIMEOUT_SECONDS": EnvVarRule(
        pattern=_POSITIVE_INT,
        description="Download timeout in whole seconds",
        example="10",
        default="10",
        warn_when_unset=False,
    ),

    # Environment and logging
    "ENVIRONMENT": EnvVarRule(
        pattern=re.compile(r"^(dev|qa|uat|test|staging|prod|production)$", re.IGNORECASE),
        description="One of dev, qa, uat, test, staging, prod",
        example="prod",
        default="dev",
    ),
    "DEBUG_MODE": EnvVarRule(
        pattern=_BOOLEAN,
        description="Boolean (true/false)",
        example="false",
        default="false",
        warn_when_unset=False,
    ),
    "LOG_LEVEL": EnvVarRule(
        pattern=re.compile(r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$", re.IGNORECASE),
        description="Log level name",
        example="INFO",
        default="INFO",
    ),
}


# ============================================================================
# VALIDATION
# ============================================================================

def validate_single_var(
    var_name: str,
    rule: EnvVarRule,
    include_warnings: bool = True
) -> Optional[EnvValidationError]:
    """
    Check one variable against its rule.

    Returns:
        The finding, or None when the variable is fine
    """
    value = os.environ.get(var_name)

    if not value:
        if rule.required:
            return EnvValidationError(
                var_name=var_name,
                message="Required environment variable not set",
                current_value=value,
                expected=f"{rule.description}, e.g. {rule.example}",
            )
        if include_warnings and rule.warn_when_unset and rule.default is not None:
            return EnvValidationError(
                var_name=var_name,
                message="Not set, using default value",
                current_value=None,
                expected=f"Default: {rule.default}",
                severity=SEVERITY_WARNING,
            )
        return None

    if not rule.pattern.match(value):
        return EnvValidationError(
            var_name=var_name,
            message="Invalid format",
            current_value=value,
            expected=f"{rule.description}, e.g. {rule.example}",
        )
    return None


def validate_environment(
    rules: Optional[Dict[str, EnvVarRule]] = None,
    include_warnings: bool = True
) -> List[EnvValidationError]:
    """Findings for every rule (ENV_VAR_RULES by default), in rule order."""
    findings = []
    for var_name, rule in (rules or ENV_VAR_RULES).items():
        finding = validate_single_var(var_name, rule, include_warnings=include_warnings)
        if finding is not None:
            findings.append(finding)
    return findings


def _split(findings: List[EnvValidationError]):
    errors = [f for f in findings if f.severity == SEVERITY_ERROR]
    warnings = [f for f in findings if f.severity == SEVERITY_WARNING]
    return errors, warnings


def get_validation_summary(include_warnings: bool = True) -> Dict[str, Any]:
    """Findings grouped by severity, values masked."""
    errors, warnings = _split(validate_environment(include_warnings=include_warnings))
    return {
        "valid": not errors,
        "error_count": len(errors),
        "warning_count": len(warnings),
        "errors": [e.to_dict() for e in errors],
        "warnings": [w.to_dict() for w in warnings],
    }


def log_validation_results(logger: Optional[logging.Logger] = None) -> bool:
    """
    Log all findings: errors at ERROR, defaults in use at WARNING.

    Args:
        logger: Target logger (default: the CONFIG component logger)

    Returns:
        True when there are no errors
    """
    if logger is None:
        from util_logger import LoggerFactory, ComponentType
        logger = LoggerFactory.create_logger(ComponentType.CONFIG, "EnvValidation")

    errors, warnings = _split(validate_environment())

    for error in errors:
        logger.error(
            f"ENV VAR ERROR: {error.var_name} - {error.message} (expected {error.expected})",
            extra={'custom_dimensions': error.to_dict()}
        )
    for warning in warnings:
        logger.warning(f"ENV VAR DEFAULT: {warning.var_name} -> {warning.expected.replace('Default: ', '')}")

    if errors:
        logger.error(f"STARTUP_FAILED: {len(errors)} environment variable errors")
        return False
    logger.info(f"Environment validation passed ({len(warnings)} vars using defaults)")
    return True


__all__ = [
    "ENV_VAR_RULES",
    "EnvVarRule",
    "EnvValidationError",
    "validate_environment",
    "validate_single_var",
    "get_validation_summary",
    "log_validation_results",
]
