from app.registry.registry import Registry

COURSES = [
    {"code": "IF101", "title": "Dasar Pemrograman", "credit_weight": 3},
    {"code": "IF102", "title": "Struktur Data", "credit_weight": 4},
    {"code": "UM101", "title": "Bahasa Indonesia", "credit_weight": 2},
]

LEARNERS = [
    {
        "registration_number": "2023001",
        "name": "Adi Nugraha",
        "department": "Teknik Informatika",
        "courses": ["IF101", "IF102"],
    },
    {
        "registration_number": "2023002",
        "name": "Siti Aminah",
        "department": "Sistem Informasi",
        "courses": ["IF101", "UM101"],
    },
]


def seed_registry(registry: Registry) -> None:
    """Load the example dataset. Enrollment goes through ``enroll`` so it is checked."""
    by_code = {}
    for row in COURSES:
        course = registry.create_course(**row)
        by_code[course.code] = course.id

    for row in LEARNERS:
        learner = registry.create_learner(
            registration_number=row["registration_number"],
            name=row["name"],
            department=row["department"],
        )
        for code in row["courses"]:
            registry.enroll(learner.id, by_code[code])
