"""Input and output schemas of the math solving flow."""

from typing import List

from pydantic import BaseModel, Field, field_validator


class SolveMathInput(BaseModel):
    equation: str = Field(description="The mathematical equation or problem to solve.")

    @field_validator("equation")
    @classmethod
    def check_not_blank(cls, v):
        if not v.strip():
            raise ValueError("equation must not be empty")
        return v


class SolveMathOutput(BaseModel):
    solution: str = Field(description="The final answer or solution to the equation.")
    steps: List[str] = Field(description="Each string is a step in the solution process.")

    def to_dict(self) -> dict:
        return self.model_dump()
