# backend/clinic/services/slots/sections.py
"""
Boundary adapter for old callers that identify a section by its display
name (testType) instead of its id.
"""

import logging

from sqlalchemy.orm import Session

from ...models.generated import Sections

logger = logging.getLogger(__name__)


def resolve_section_id(
    db: Session,
    section_id: int | None,
    test_type: str | None = None,
) -> int | None:
    """Normalize (sectionId, testType) to an optional section id."""
    if section_id is not None:
        return section_id
    if not test_type:
        return None

    section = (
        db.query(Sections)
        .filter(Sections.name == test_type.strip(), Sections.is_active == 1)
        .first()
    )
    if section is None:
        logger.info("No active section named %r, using location scope", test_type)
        return None
    return section.id
