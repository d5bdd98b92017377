"""Per-call formatting options and the lesson metadata they carry."""

from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AgeGroup(str, Enum):
    """Target audience of a lesson; selects wrapper classes and colour scheme."""
    YOUNG = 'YOUNG'
    OLDER = 'OLDER'
    
    @classmethod
    def coerce(cls, value: Any) -> 'AgeGroup':
        """Accept an AgeGroup or its name in any case; ``None`` means OLDER."""
        if value is None:
            return cls.OLDER
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unknown age group: {value!r}") from None


def _none_as_empty(value: Any) -> Any:
    return () if value is None else value


class LessonModel(BaseModel):
    """Frozen model read from camelCase mappings; snake_case names work too."""
    
    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)


class Chapter(LessonModel):
    title: str
    content: Optional[str] = None
    key_points: Tuple[str, ...] = Field(default=(), alias='keyPoints')
    
    @field_validator('key_points', mode='before')
    @classmethod
    def key_points_or_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)


class VocabularyItem(LessonModel):
    term: str
    definition: str
    example: Optional[str] = None


class Exercise(LessonModel):
    """An interactive exercise whose question is tagged in the rendered lesson."""
    id: str
    type: str
    question_text: str = Field(alias='questionText')
    expected_answer: str = Field(default='', alias='expectedAnswer')
    acceptable_answers: Tuple[str, ...] = Field(default=(), alias='acceptableAnswers')
    hint1: Optional[str] = None
    hint2: Optional[str] = None
    explanation: Optional[str] = None
    difficulty: Optional[str] = None
    location_in_content: Optional[str] = Field(default=None, alias='locationInContent')
    
    @field_validator('acceptable_answers', mode='before')
    @classmethod
    def answers_or_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)


class DocumentFormatterOptions(LessonModel):
    """Read-only options for one formatting call.
    
    ``content_blocks`` is kept as given (mappings or typed blocks); the
    orchestrator validates it before use.
    """
    age_group: AgeGroup = Field(default=AgeGroup.OLDER, alias='ageGroup')
    chapters: Tuple[Chapter, ...] = ()
    vocabulary: Tuple[VocabularyItem, ...] = ()
    exercises: Tuple[Exercise, ...] = ()
    content_blocks: Any = Field(default=None, alias='contentBlocks')
    
    @field_validator('chapters', 'vocabulary', 'exercises', mode='before')
    @classmethod
    def lists_or_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)
    
    @field_validator('age_group', mode='before')
    @classmethod
    def coerce_age_group(cls, value: Any) -> AgeGroup:
        return AgeGroup.coerce(value)
    
    @classmethod
    def coerce(cls, options: Any) -> 'DocumentFormatterOptions':
        """Accept options, a mapping of options or ``None``.
        
        Raises:
            pydantic.ValidationError: If a mapping entry is malformed.
            TypeError: For any other kind of value.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.model_validate(dict(options))
        raise TypeError(f"Unsupported options type: {type(options).__name__}")
