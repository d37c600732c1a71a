"""
Schema extraction from sampled records.

The catalog publishes no usable schema, so fields are discovered from a
single sample record. The result is best-effort.
"""

from typing import Any, Dict, List

from university_data.core.models import FieldDescriptor
from university_data.schema.type_mappings import TypeMapper


class SchemaExtractor:
    """
    Derives field descriptors from a sample record.

    Field order follows the sample's key order.
    """

    def infer_fields(self, sample: Dict[str, Any]) -> List[FieldDescriptor]:
        """
        Describe every field of the sample record.

        Args:
            sample: One record as returned by the catalog

        Returns:
            One descriptor per key, with inferred type and a readable description
        """
        return [
            FieldDescriptor(
                name=name,
                type=TypeMapper.infer_type(name, value),
                description=self.describe(name),
            )
            for name, value in sample.items()
        ]

    @staticmethod
    def describe(field_name: str) -> str:
        return field_name.replace("_", " ")
