from dataclasses import dataclass, field


@dataclass(frozen=True)
class Learner:
    registration_number: str
    name: str
    department: str | None = None
    course_ids: tuple[str, ...] = field(default_factory=tuple)

    # assigned by the store on create, never changed afterwards
    id: str = ""

    def is_enrolled(self, course_id: str) -> bool:
        return course_id in self.course_ids
