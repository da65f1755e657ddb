from enum import Enum
from typing import Dict, List, Union

from pydantic import BaseModel, Field, model_validator


class QuizType(str, Enum):
    MULTIPLE_CHOICE = "multiple_choice"
    FILL_BLANK = "fill_blank"
    MATCHING = "matching"


class VocabularyWord(BaseModel):
    word: str
    definition: str = ""

    class Config:
        from_attributes = True


class MultipleChoiceQuestion(BaseModel):
    question: str
    options: Dict[str, str]  # letter -> option text
    correct_answer: str = Field(alias="correctAnswer")

    class Config:
        frozen = True
        populate_by_name = True


class FillBlankQuestion(BaseModel):
    sentence: str
    correct_answer: str = Field(alias="correctAnswer")

    class Config:
        frozen = True
        populate_by_name = True


class MatchPair(BaseModel):
    word: str
    definition: str

    class Config:
        frozen = True


class MatchingPayload(BaseModel):
    words: List[str]
    definitions: List[str]
    matches: List[MatchPair]

    class Config:
        frozen = True


class QuizSpec(BaseModel):
    type: QuizType
    questions: Union[MatchingPayload, List[MultipleChoiceQuestion], List[FillBlankQuestion]]

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_questions_fit_type(self) -> "QuizSpec":
        questions = self.questions
        if self.type == QuizType.MATCHING:
            if not isinstance(questions, MatchingPayload):
                raise ValueError("matching quiz needs words, definitions and matches")
            if not questions.words:
                raise ValueError("matching quiz has no words")
            if not len(questions.words) == len(questions.definitions) == len(questions.matches):
                raise ValueError("matching quiz words, definitions and matches differ in length")
            return self

        expected = MultipleChoiceQuestion if self.type == QuizType.MULTIPLE_CHOICE else FillBlankQuestion
        if not isinstance(questions, list) or not questions:
            raise ValueError(f"{self.type.value} quiz has no questions")
        if not all(isinstance(q, expected) for q in questions):
            raise ValueError(f"{self.type.value} quiz holds questions of another type")
        return self

    @property
    def total_questions(self) -> int:
        if isinstance(self.questions, MatchingPayload):
            return len(self.questions.words)
        return len(self.questions)

    def to_payload(self) -> dict:
        """Wire shape stored by the CRUD layer (camelCase answers)."""
        return self.model_dump(mode="json", by_alias=True)


class QuizAttemptResult(BaseModel):
    score: int = Field(ge=0)
    total_questions: int = Field(ge=0)
    per_question_correct: List[bool]

    class Config:
        frozen = True
