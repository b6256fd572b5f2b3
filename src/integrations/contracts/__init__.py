"""
Contracts (data models).

This folder defines the request/response shapes exchanged with the
verification provider:
- the parameter schema (field name -> FieldSchema)
- the applicant record posted for evaluation
- the decision document and its outcome categories

The API endpoints relay provider JSON; the form interprets it through these models.
"""
