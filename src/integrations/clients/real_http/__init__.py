"""
Real HTTP integration clients.

- verification: identity-verification provider (parameters, evaluations)

Important:
- Must return data shaped according to src/integrations/contracts/*
- Credentials are checked before any request is made
"""
