"""Output layer: JSON, quiet, and Rich-rendered views of ServiceResult."""
