"""
Studio session - user-visible state of one ShortsMind session.

Wires the recommendation coordinator, the preview controller and the
library store together and owns everything the view renders: form fields,
the current batch, the selection, loading flags, the library toggle and a
list of notices. Every operation converts failures into notices; nothing
raises out of the session.
"""

import asyncio
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set

from shortsmind.core import get_logger, set_session_id
from shortsmind.core.exceptions import ShortsMindError, StorageError, ValidationError
from shortsmind.models import Concept, ContentCategory, SavedConcept, SaveResult, VisualMode
from shortsmind.services.infrastructure.llm.gemini import GeminiGenerationClient
from shortsmind.services.infrastructure.storage import FileKeyValueStore, KeyValueStore, LibraryStore
from shortsmind.services.pipeline.audio import AudioPreviewPipeline
from shortsmind.services.pipeline.captions import extract_captions
from shortsmind.services.pipeline.preview import EnrichmentTicket, SelectionController, SelectionState
from shortsmind.services.pipeline.recommendation import RecommendationCoordinator

logger = get_logger(__name__, component="studio_session")


class NoticeLevel(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    level: NoticeLevel
    message: str


class StudioSession:
    """State holder for one user session.

    Usage:
        session = StudioSession.create()
        session.keywords = "습관, 아침"
        session.category = ContentCategory.SELF_IMPROVEMENT
        if await session.recommend():
            await session.select(session.concepts[0])
            await session.play_hook_audio()
    """

    def __init__(
        self,
        coordinator: RecommendationCoordinator,
        controller: SelectionController,
        library: LibraryStore,
        session_id: Optional[str] = None,
    ):
        self.coordinator = coordinator
        self.controller = controller
        self.library = library
        self.session_id = session_id or uuid.uuid4().hex[:12]
        set_session_id(self.session_id)

        # Form
        self.category = ContentCategory.QUOTES
        self.visual_style = VisualMode.REALISTIC
        self.featured_figure = ""
        self.keywords = ""

        self.concepts: List[Concept] = []
        self.selection = SelectionState()
        self.recommending = False
        self.audio_loading = False
        self.show_library = False
        self.notices: List[Notice] = []

        self._batch = 0
        self._enrichment_tasks: Set[asyncio.Task] = set()

    @classmethod
    def create(
        cls,
        client: Optional[GeminiGenerationClient] = None,
        kv_store: Optional[KeyValueStore] = None,
    ) -> "StudioSession":
        """Build a session on the Gemini client and the file-backed library."""
        client = client or GeminiGenerationClient()
        audio = AudioPreviewPipeline(client)
        return cls(
            coordinator=RecommendationCoordinator(client),
            controller=SelectionController(client, audio),
            library=LibraryStore(kv_store or FileKeyValueStore()),
        )

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def selected_concept(self) -> Optional[Concept]:
        return self.selection.concept

    @property
    def image_loading(self) -> bool:
        return self.selection.image_loading

    @property
    def is_selected_saved(self) -> bool:
        concept = self.selection.concept
        return concept is not None and self.library.contains(concept.id)

    @property
    def saved_concepts(self):
        return self.library.list()

    def _notify(self, level: NoticeLevel, message: str) -> None:
        self.notices.append(Notice(level, message))

    def drain_notices(self) -> List[Notice]:
        notices, self.notices = self.notices, []
        return notices

    # ------------------------------------------------------------------
    # Recommendation
    # ------------------------------------------------------------------

    async def recommend(self) -> bool:
        """Request a new concept batch for the current form values.

        Returns True when this call's batch became the current one.
        """
        try:
            request = self.coordinator.build_request(
                self.category, self.keywords, self.visual_style, self.featured_figure
            )
            self.coordinator.validate(request)
        except ValidationError as exc:
            self._notify(NoticeLevel.WARNING, f"인물 이름이나 키워드를 입력해주세요. ({exc})")
            return False

        self._batch += 1
        batch = self._batch
        self.recommending = True
        self.show_library = False
        self.concepts = []
        self.selection = self.controller.clear(self.selection)

        try:
            concepts = await self.coordinator.execute(request)
        except ShortsMindError as exc:
            logger.warning(f"Recommendation failed: {exc}")
            if batch == self._batch:
                self._notify(NoticeLevel.ERROR, f"추천 로딩 중 오류가 발생했습니다: {exc}")
            return False
        except Exception as exc:
            logger.error(f"Unexpected recommendation failure: {exc}", exc_info=True)
            if batch == self._batch:
                self._notify(NoticeLevel.ERROR, "추천 로딩 중 오류가 발생했습니다.")
            return False
        finally:
            if batch == self._batch:
                self.recommending = False

        if batch != self._batch:
            logger.debug(f"Dropping superseded batch {batch} (current {self._batch})")
            return False
        self.concepts = concepts
        return True

    # ------------------------------------------------------------------
    # Selection & preview
    # ------------------------------------------------------------------

    def select(self, concept: Concept) -> asyncio.Task:
        """Select a concept and start its preview image request.

        The selection takes effect immediately; the returned task resolves
        once the image outcome has been applied (or discarded as stale).
        """
        self.selection, ticket = self.controller.select(self.selection, concept, self.visual_style)
        task = asyncio.get_running_loop().create_task(self._enrich(ticket))
        self._enrichment_tasks.add(task)
        task.add_done_callback(self._enrichment_tasks.discard)
        return task

    def select_saved(self, saved: SavedConcept) -> asyncio.Task:
        """Select a library entry, restoring the category it was saved under."""
        self.category = saved.category
        return self.select(saved)

    async def _enrich(self, ticket: EnrichmentTicket) -> None:
        outcome = await self.controller.fetch_image(ticket)
        self.selection = self.controller.apply_image(self.selection, outcome)

    def clear_selection(self) -> None:
        self.selection = self.controller.clear(self.selection)

    async def play_hook_audio(self) -> bool:
        concept = self.selection.concept
        if concept is None:
            return False

        self.audio_loading = True
        try:
            await self.controller.trigger_audio_preview(concept, self.category)
        except ShortsMindError as exc:
            logger.warning(f"Hook narration failed: {exc}")
            self._notify(NoticeLevel.ERROR, f"오디오 생성 중 오류가 발생했습니다: {exc}")
            return False
        except Exception as exc:
            logger.error(f"Unexpected narration failure: {exc}", exc_info=True)
            self._notify(NoticeLevel.ERROR, "오디오 생성 중 오류가 발생했습니다.")
            return False
        finally:
            self.audio_loading = False
        return True

    def extract_captions(self) -> str:
        """Caption text of the selected concept's script ("" when none)."""
        concept = self.selection.concept
        if concept is None:
            return ""

        captions = extract_captions(concept.detailed_script)
        if not captions:
            self._notify(NoticeLevel.INFO, "대본에서 추출할 자막이 없습니다.")
        else:
            count = len(captions.split("\n"))
            self._notify(NoticeLevel.SUCCESS, f"자막 {count}줄을 추출했습니다.")
        return captions

    # ------------------------------------------------------------------
    # Library
    # ------------------------------------------------------------------

    def save_selected(self) -> Optional[SaveResult]:
        concept = self.selection.concept
        if concept is None:
            return None

        try:
            result = self.library.save(concept, self.category)
        except StorageError as exc:
            logger.error(f"Saving '{concept.id}' failed: {exc}")
            self._notify(NoticeLevel.ERROR, f"저장에 실패했습니다: {exc}")
            return None

        if result is SaveResult.ALREADY_EXISTS:
            self._notify(NoticeLevel.INFO, "이미 저장된 컨셉입니다.")
        else:
            self._notify(NoticeLevel.SUCCESS, "라이브러리에 저장되었습니다.")
        return result

    def remove_saved(self, concept_id: str) -> bool:
        try:
            self.library.remove(concept_id)
        except StorageError as exc:
            logger.error(f"Removing '{concept_id}' failed: {exc}")
            self._notify(NoticeLevel.ERROR, f"삭제에 실패했습니다: {exc}")
            return False

        selected = self.selection.concept
        if selected is not None and selected.id == concept_id:
            self.clear_selection()
        return True

    def clear_library(self) -> bool:
        selected = self.selection.concept
        was_saved = selected is not None and self.library.contains(selected.id)
        try:
            self.library.clear()
        except StorageError as exc:
            logger.error(f"Clearing library failed: {exc}")
            self._notify(NoticeLevel.ERROR, f"라이브러리를 비우지 못했습니다: {exc}")
            return False

        if was_saved:
            self.clear_selection()
        return True

    def toggle_library_view(self) -> bool:
        self.show_library = not self.show_library
        return self.show_library
