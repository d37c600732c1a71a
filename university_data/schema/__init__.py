"""Field discovery from sampled catalog records."""

from university_data.schema.type_mappings import TypeMapper
from university_data.schema.extractor import SchemaExtractor

__all__ = ["TypeMapper", "SchemaExtractor"]
