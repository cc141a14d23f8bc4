"""
Logging Sanitizer Utility

Provides utilities to sanitize sensitive data before logging.
Prevents donor contact details and credentials from reaching the ledger logs.
"""

from typing import Any, Dict, Sequence


# Fields that should never be logged
SENSITIVE_FIELDS = {
    'phone',
    'phone_number',
    'mobile',
    'email',
    'password',
    'secret',
    'secret_key',
    'token',
    'api_key',
    'apikey',
    'auth_token',
    'access_token',
    'session_id',
}


def sanitize_dict(data: Dict[str, Any], redact_text: str = '[REDACTED]') -> Dict[str, Any]:
    """
    Sanitize a dictionary by replacing sensitive field values with redaction text.

    Args:
        data: Dictionary to sanitize
        redact_text: Text to use for redacted values (default: '[REDACTED]')

    Returns:
        Sanitized dictionary with sensitive values replaced

    Example:
        >>> sanitize_dict({'name': 'Alice', 'phone': '555-0100'})
        {'name': 'Alice', 'phone': '[REDACTED]'}
    """
    if not data:
        return data

    sanitized = {}
    for key, value in data.items():
        # Check if key (case-insensitive) matches any sensitive field
        if key.lower() in SENSITIVE_FIELDS:
            sanitized[key] = redact_text
        elif isinstance(value, dict):
            # Recursively sanitize nested dictionaries
            sanitized[key] = sanitize_dict(value, redact_text)
        else:
            sanitized[key] = value

    return sanitized


def sanitize_invocation(param_names: Sequence[str], args: Sequence[Any], redact_text: str = '[REDACTED]') -> Dict[str, Any]:
    """
    Pair positional command arguments with their parameter names and sanitize them.

    Arguments beyond the named parameters are kept under ``extra_<n>`` keys so a
    wrong-arity call still shows up in the log.

    Example:
        >>> sanitize_invocation(('id', 'name', 'phone'), ['d1', 'Alice', '555-0100'])
        {'id': 'd1', 'name': 'Alice', 'phone': '[REDACTED]'}
    """
    named = {}
    for index, value in enumerate(args):
        if index < len(param_names):
            named[param_names[index]] = value
        else:
            named[f'extra_{index}'] = value
    return sanitize_dict(named, redact_text)


def sanitize_exception_message(exception: BaseException) -> str:
    """
    Sanitize exception messages to ensure they don't contain sensitive data.

    Args:
        exception: Exception to sanitize

    Returns:
        Sanitized exception message
    """
    message = str(exception)

    # Simple heuristic: any sensitive field name in the text hides the message
    if any(field in message.lower() for field in SENSITIVE_FIELDS):
        return f"{type(exception).__name__}: [Message contains sensitive data]"

    return message
