"""
Customers module.

Scope:
- Add-customer form (draft editing + submission to the customers API)
- Customer listing (redirect target after a successful add)

Records live in the external customers API; nothing is persisted here.
"""
