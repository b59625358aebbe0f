"""Sort configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from humanesort.classifiers import DEFAULT_CLASSIFIER, Classifier, ClassifierRegistry


class SortOptions(BaseModel):
    """Options controlling a humane sort.

    Attributes:
        classifier: Name of a registered classifier.
        reverse: Sort in descending order. Equal elements keep their
            input order either way.
    """

    model_config = ConfigDict(frozen=True)

    classifier: str = Field(default=DEFAULT_CLASSIFIER, min_length=1)
    reverse: bool = False

    @field_validator("classifier")
    @classmethod
    def _classifier_registered(cls, value: str) -> str:
        if not ClassifierRegistry.is_registered(value):
            available = ", ".join(ClassifierRegistry.names())
            raise ValueError(f"unknown classifier {value!r} (available: {available})")
        return value

    def resolve_classifier(self) -> Classifier:
        """Return the classifier function these options name."""
        return ClassifierRegistry.get(self.classifier)
