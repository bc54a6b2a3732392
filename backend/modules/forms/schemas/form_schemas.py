# backend/modules/forms/schemas/form_schemas.py

from pydantic import Field, model_validator
from typing import Optional, List, Literal

from core.schemas import CamelModel
from modules.branding.models.brand_models import (
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_BUTTON_STYLE,
)
from modules.branding.schemas.brand_schemas import ButtonStyle, HEX_COLOR_PATTERN

QuestionType = Literal["rating", "multiple-choice", "open-ended", "single-choice"]

CHOICE_QUESTION_TYPES = {"multiple-choice", "single-choice"}


class Question(CamelModel):
    """A single form question"""

    id: str = Field(..., min_length=1)
    type: QuestionType
    question: str = Field(..., min_length=1)
    options: Optional[List[str]] = None
    required: bool = False

    @model_validator(mode="after")
    def check_options(self):
        if self.type in CHOICE_QUESTION_TYPES and not self.options:
            raise ValueError(f"{self.type} question '{self.id}' needs at least one option")
        return self


class Appearance(CamelModel):
    """Visual settings of a form"""

    brand_color: str = Field(DEFAULT_PRIMARY_COLOR, pattern=HEX_COLOR_PATTERN)
    logo: Optional[str] = None
    font_family: str = DEFAULT_FONT_FAMILY
    button_style: ButtonStyle = DEFAULT_BUTTON_STYLE


class FeedbackFormBase(CamelModel):
    """Base feedback form schema"""

    name: str = Field(..., min_length=1, max_length=255)
    questions: List[Question] = Field(default_factory=list)
    appearance: Appearance = Field(default_factory=Appearance)
    business_id: Optional[int] = None

    @model_validator(mode="after")
    def check_unique_question_ids(self):
        ids = [q.id for q in self.questions]
        if len(ids) != len(set(ids)):
            raise ValueError("Question ids must be unique within a form")
        return self


class FeedbackFormCreate(FeedbackFormBase):
    pass


class FeedbackFormUpdate(CamelModel):
    """Schema for partial form updates"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    questions: Optional[List[Question]] = None
    appearance: Optional[Appearance] = None
    business_id: Optional[int] = None

    @model_validator(mode="after")
    def check_unique_question_ids(self):
        if self.questions:
            ids = [q.id for q in self.questions]
            if len(ids) != len(set(ids)):
                raise ValueError("Question ids must be unique within a form")
        return self


class FeedbackFormResponse(FeedbackFormBase):
    """Schema for form responses"""

    id: int
