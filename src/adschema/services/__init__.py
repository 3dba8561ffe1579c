"""Service layer — operations over the static catalog, returning ServiceResult."""
