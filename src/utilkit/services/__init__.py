"""Service layer — wraps toolkit operations in ServiceResult."""
