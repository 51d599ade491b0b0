"""
Domain layer for contact inquiry intake.

This layer contains:
- Data models (raw input, validated Submission)
- Business logic (validate-then-publish pipeline)
- Result types (explicit success/failure handling)
- The Publisher contract implemented by integrations
"""
