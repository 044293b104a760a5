"""Per-call classification options."""
from typing import Any, Dict, Mapping, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from config.settings import get_settings


class ClassificationOptions(BaseModel):
    """Options controlling a single English/non-English decision."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    english_threshold: float = Field(default=0.8, ge=0.0, le=1.0)
    min_word_length: int = Field(default=2, ge=0)
    allow_numbers: bool = True
    # Reserved: accepted and part of the word cache key, no effect on decisions
    allow_abbreviations: bool = True

    @classmethod
    def from_settings(cls) -> "ClassificationOptions":
        """Build options from configured defaults."""
        settings = get_settings()
        return cls(
            english_threshold=settings.english_threshold,
            min_word_length=settings.min_word_length,
            allow_numbers=settings.allow_numbers,
            allow_abbreviations=settings.allow_abbreviations,
        )

    @classmethod
    def resolve(
        cls,
        options: Optional[Union["ClassificationOptions", Mapping[str, Any]]] = None,
        **overrides: Any
    ) -> "ClassificationOptions":
        """
        Merge caller options over configured defaults.

        Args:
            options: Options object or mapping with any subset of fields
            **overrides: Individual field overrides, applied last

        Returns:
            Validated options

        Raises:
            ValueError: If a value is out of range or a field is unknown
        """
        if isinstance(options, cls) and not overrides:
            return options

        values: Dict[str, Any] = cls.from_settings().model_dump()
        if isinstance(options, cls):
            values.update(options.model_dump())
        elif options:
            values.update(options)
        values.update(overrides)
        return cls(**values)
