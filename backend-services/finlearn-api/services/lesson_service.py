# backend-services/finlearn-api/services/lesson_service.py
"""
Lesson service: summaries for the lesson index, full detail by id, categories.
"""
import logging
from typing import Dict, List, Optional

from shared.contracts import LessonCategory, LessonDetail, LessonSummary
from catalog.lessons import LessonCatalog

logger = logging.getLogger(__name__)


class LessonService:
    def __init__(self, catalog: LessonCatalog):
        self._lessons = catalog.lessons
        self._categories = catalog.categories
        self._by_id: Dict[str, LessonDetail] = {lesson.id: lesson for lesson in self._lessons}
        self._summaries = tuple(lesson.to_summary() for lesson in self._lessons)

    def list_summaries(self) -> List[LessonSummary]:
        return list(self._summaries)

    def get_detail(self, lesson_id: str) -> Optional[LessonDetail]:
        # ids are matched exactly, case included
        lesson = self._by_id.get(lesson_id)
        if lesson is None:
            logger.info(f"Lesson '{lesson_id}' not found.")
        return lesson

    def list_categories(self) -> List[LessonCategory]:
        return list(self._categories)
