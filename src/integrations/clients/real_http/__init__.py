"""
Real HTTP integration clients.

These clients communicate with real external systems, e.g.:
- Stripe Checkout (hosted card payment)

Important:
- Must implement the same interfaces as the mock clients
- Must return data shaped according to src/integrations/contracts/*

Switching:
The selection of mock vs real clients happens in src/api/endpoints/notices.py only.
"""
