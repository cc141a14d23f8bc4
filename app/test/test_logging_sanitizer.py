"""
Test the logging sanitizer utility.
Verifies donor phone numbers and credentials are redacted from ledger logs.
"""

from app.utils.logging_sanitizer import (
    sanitize_dict,
    sanitize_invocation,
    sanitize_exception_message,
    SENSITIVE_FIELDS,
)


def test_sanitize_dict():
    """Test dictionary sanitization"""
    result = sanitize_dict({'id': 'd1', 'name': 'Alice', 'phone': '555-0100'})
    assert result['id'] == 'd1', "Id should not be redacted"
    assert result['name'] == 'Alice', "Name should not be redacted"
    assert result['phone'] == '[REDACTED]', "Phone should be redacted"

    # Case insensitivity
    result = sanitize_dict({'Phone': '1', 'PHONE': '2', 'Secret_Key': 'x'})
    assert result == {'Phone': '[REDACTED]', 'PHONE': '[REDACTED]', 'Secret_Key': '[REDACTED]'}

    # Nested dictionaries
    result = sanitize_dict({'donor': {'name': 'Alice', 'phone': '555-0100'}, 'npo': {'name': 'Helping Hands'}})
    assert result['donor']['phone'] == '[REDACTED]', "Nested phone should be redacted"
    assert result['donor']['name'] == 'Alice'
    assert result['npo']['name'] == 'Helping Hands'

    # Empty input passes through
    assert sanitize_dict({}) == {}
    assert sanitize_dict(None) is None


def test_custom_redact_text():
    result = sanitize_dict({'phone': '555-0100'}, redact_text='***')
    assert result['phone'] == '***'


def test_sanitize_invocation():
    """Positional command arguments are named and sanitized"""
    result = sanitize_invocation(('id', 'name', 'phone'), ['d1', 'Alice', '555-0100'])
    assert result == {'id': 'd1', 'name': 'Alice', 'phone': '[REDACTED]'}

    # Extra arguments are kept so bad calls are still visible
    result = sanitize_invocation(('id',), ['n1', 'unexpected'])
    assert result == {'id': 'n1', 'extra_1': 'unexpected'}

    assert sanitize_invocation((), []) == {}


def test_sanitize_exception_message():
    assert sanitize_exception_message(ValueError('disk I/O error')) == 'disk I/O error'
    hidden = sanitize_exception_message(ValueError('bad phone 555-0100'))
    assert '555-0100' not in hidden
    assert hidden.startswith('ValueError')


def test_sensitive_fields_coverage():
    """Test that common sensitive field names are covered"""
    for field in ('phone', 'password', 'secret_key', 'token', 'api_key'):
        assert field in SENSITIVE_FIELDS, f"{field} should be in SENSITIVE_FIELDS"
