from dataclasses import dataclass


@dataclass(frozen=True)
class Course:
    code: str
    title: str
    credit_weight: int

    id: str = ""
