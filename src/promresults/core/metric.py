"""Typed read access to the labels of a decoded series."""

import logging
from collections.abc import Mapping
from typing import Any

from promresults.core.errors import FieldFormatError, FieldMissingError

LABEL_PREFIX = "label_"
ANNOTATION_PREFIX = "annotation_"

logger = logging.getLogger(__name__)


class MetricAccessor:
    """Read-only view over a series' label map.

    Label values arrive untyped. Lookups of individual fields fail loudly on
    non-string values, while the prefix views skip them with a warning.
    """

    def __init__(self, labels: Mapping[str, Any]) -> None:
        self._labels = labels

    def get_string(self, field: str) -> str:
        """Return the string value of a label.

        Raises:
            FieldMissingError: If the label is absent.
            FieldFormatError: If the label value is not a string.
        """
        if field not in self._labels:
            raise FieldMissingError(field)
        value = self._labels[field]
        if not isinstance(value, str):
            raise FieldFormatError(field)
        return value

    def get_strings(self, *fields: str) -> dict[str, str]:
        """Return the string values of several labels.

        Raises:
            FieldMissingError: For the first absent label.
            FieldFormatError: For the first label with a non-string value.
        """
        return {field: self.get_string(field) for field in fields}

    def get_prefixed(self, prefix: str) -> dict[str, str]:
        """Return labels starting with prefix, keyed without the prefix.

        Args:
            prefix: Key prefix to select, e.g. "label_".

        Returns:
            Mapping of suffix to value. Non-string values are skipped.
        """
        result: dict[str, str] = {}
        for key, value in self._labels.items():
            if not key.startswith(prefix):
                continue
            name = key[len(prefix) :]
            if not isinstance(value, str):
                logger.warning(
                    "Failed to parse label value for label: '%s'",
                    name,
                    extra={"prefix": prefix},
                )
                continue
            result[name] = value
        return result

    def get_labels(self) -> dict[str, str]:
        """Return all ``label_*`` entries keyed by label name."""
        return self.get_prefixed(LABEL_PREFIX)

    def get_annotations(self) -> dict[str, str]:
        """Return all ``annotation_*`` entries keyed by annotation name."""
        return self.get_prefixed(ANNOTATION_PREFIX)
