"""Service layer wrapping the domain engine behind ServiceResult."""
