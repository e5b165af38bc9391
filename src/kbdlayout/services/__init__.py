"""Service layer — wraps layout composition in the ServiceResult contract."""
