"""
Checkout metadata contract.

Session metadata is the only place submitted form data lives between the
form post and the success redirect. Providers store it as a flat
string-to-string mapping with documented limits (Stripe: 50 keys, keys up to
40 characters, values up to 500 characters). Nested structures are not
supported, so a FieldSet is always sent in its flat `to_metadata()` form.
"""

from typing import Any, Dict, List, Mapping

from .interfaces import CheckoutSession, GatewayError, PaymentStatus

MAX_METADATA_KEYS = 50
MAX_METADATA_KEY_LENGTH = 40
MAX_METADATA_VALUE_LENGTH = 500


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def metadata_limit_errors(metadata: Mapping[str, Any]) -> List[str]:
    """
    Return a list of limit violations.
    Empty list means the metadata can be attached as-is.
    """
    errors: List[str] = []

    if len(metadata) > MAX_METADATA_KEYS:
        errors.append(f"metadata has {len(metadata)} keys (max {MAX_METADATA_KEYS})")
    for key, value in metadata.items():
        if not isinstance(key, str) or not isinstance(value, str):
            errors.append(f"metadata entry {key!r} must map a string to a string")
            continue
        if len(key) > MAX_METADATA_KEY_LENGTH:
            errors.append(f"metadata key '{key}' exceeds {MAX_METADATA_KEY_LENGTH} characters")
        if len(value) > MAX_METADATA_VALUE_LENGTH:
            errors.append(f"metadata value for '{key}' exceeds {MAX_METADATA_VALUE_LENGTH} characters")

    return errors


def check_metadata_limits(metadata: Mapping[str, Any]) -> Dict[str, str]:
    errors = metadata_limit_errors(metadata)
    if errors:
        raise GatewayError("; ".join(errors))
    return dict(metadata)


def is_paid(session: CheckoutSession) -> bool:
    """Return True once the provider reports the session as settled."""
    return session.payment_status in {PaymentStatus.PAID, PaymentStatus.NO_PAYMENT_REQUIRED}
