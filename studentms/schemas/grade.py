from pydantic import BaseModel, ConfigDict, Field, computed_field

# Grading policy. Fixed, there is no configuration surface for it.
INTERNAL_WEIGHT = 0.3
FINAL_WEIGHT = 0.7
PASS_THRESHOLD = 50.0


def weighted_score(internal: float, final: float) -> float:
    """Weighted course score: 30% internal, 70% final."""
    return INTERNAL_WEIGHT * internal + FINAL_WEIGHT * final


def is_pass(score: float) -> bool:
    return score >= PASS_THRESHOLD


class MarksEntry(BaseModel):
    internal_mark: float = Field(ge=0, le=100)
    final_mark: float = Field(ge=0, le=100)


class Grade(BaseModel):
    roll_no: str
    course_code: str
    internal_mark: float = 0.0
    final_mark: float = 0.0

    model_config = ConfigDict(from_attributes=True)

    @property
    def key(self) -> tuple:
        return (self.roll_no, self.course_code)

    @computed_field
    @property
    def weighted(self) -> float:
        return weighted_score(self.internal_mark, self.final_mark)
