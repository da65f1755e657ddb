from pydantic import BaseModel, Field


class WordDifficultyCounts(BaseModel):
    beginner: int = Field(default=0, ge=0)  # len <= 5
    intermediate: int = Field(default=0, ge=0)  # 6..10
    advanced: int = Field(default=0, ge=0)  # > 10

    @property
    def total(self) -> int:
        return self.beginner + self.intermediate + self.advanced


class ParagraphLevelCounts(BaseModel):
    A2: int = Field(default=0, ge=0)
    B1: int = Field(default=0, ge=0)
    B2: int = Field(default=0, ge=0)
    C1: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.A2 + self.B1 + self.B2 + self.C1


class ActivityCounts(BaseModel):
    words_by_difficulty: WordDifficultyCounts = Field(default_factory=WordDifficultyCounts)
    quiz_attempts: int = Field(default=0, ge=0)
    quiz_avg_score_percent: float = Field(default=0, ge=0, le=100)
    paragraphs_by_level: ParagraphLevelCounts = Field(default_factory=ParagraphLevelCounts)

    class Config:
        frozen = True


class ProgressStats(BaseModel):
    words_learned: int
    quiz_score_avg: float
    quiz_attempts: int
    paragraphs_read: int


class ProgressResult(BaseModel):
    level: int
    level_name: str
    points: int
    next_level: int
    next_level_name: str
    next_level_points: int
    current_level_points: int
    percent_to_next: int = Field(ge=0, le=100)
    cefr_equivalent: str
    stats: ProgressStats

    class Config:
        frozen = True
