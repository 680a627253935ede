"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- no Stripe secret key is available (local development)
- we want to test the checkout flow end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients should return data shaped according to src/integrations/contracts/*

Switching to real:
Set STRIPE_SECRET_KEY (and optionally INTEGRATIONS_MODE=real); the gateway is
selected in src/api/endpoints/notices.py.
"""
