"""Rule pipelines: pluralizer, singularizer, article selector, compare."""
