"""
Seed demo submissions for development.
Run: python -m scripts.seed_submissions  (from backend/)

Every row goes through the same validate-then-store path as the API,
so a seed record that breaks the form's rules is reported, not stored.
"""

import asyncio

from forms_api.core.errors import SubmissionValidationError
from forms_api.db.session import async_session, init_models
from forms_api.schema.registry import get_form_schema
from forms_api.services.submissions import submit


SEED_SUBMISSIONS = [
    {
        "fullName": "Asha Raman",
        "age": 29,
        "gender": "Female",
        "skills": ["React", "Tailwind"],
        "joinDate": "2025-02-03",
        "bio": "Frontend engineer focused on design systems.",
        "isActive": True,
    },
    {
        "fullName": "Daniel Okafor",
        "age": 41,
        "gender": "Male",
        "skills": ["Node", "AWS"],
        "joinDate": "2025-03-17",
        "bio": "Backend lead, owns the payments services.",
        "isActive": True,
    },
    {
        "fullName": "Sam Lindqvist",
        "age": 23,
        "gender": "Other",
        "skills": ["React"],
        "joinDate": "2025-06-01",
        "bio": "Graduate hire rotating through platform teams.",
        "isActive": False,
    },
]


async def seed() -> int:
    """Insert seed submissions. Returns the number stored."""
    await init_models()
    form = get_form_schema()
    stored = 0
    async with async_session() as session:
        for record in SEED_SUBMISSIONS:
            try:
                submission = await submit(session, form, record)
            except SubmissionValidationError as exc:
                print(f"  Skipped {record.get('fullName')!r}: {exc.errors}")
                continue
            stored += 1
            print(f"  Created submission: {submission.submission_id} ({submission.full_name})")
    print(f"Seeded {stored} submissions.")
    return stored


if __name__ == "__main__":
    asyncio.run(seed())
