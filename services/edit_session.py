"""등록/수정 세션 컨트롤러.

화면 상태(BoardScreen)와 수정 대상 id를 한 객체에 모아 두고, 사용자 동작
(등록, 수정 시작, 보기, 삭제, 검색)을 AnnouncementStore 연산으로 옮긴다.
변경이 일어나면 항상 저장 → 화면 갱신 순서를 지킨다.
"""
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Optional

from models import DEFAULT_AUTHOR, Announcement, format_datetime
from services.presenter import (
    DetailView,
    ListView,
    detail_prompt,
    render_detail,
    render_list,
)
from services.search import filter_announcements

logger = logging.getLogger(__name__)

MODE_CREATE = "create"
MODE_EDIT = "edit"

SUBMIT_LABELS = {MODE_CREATE: "등록", MODE_EDIT: "수정 완료"}

REQUIRED_FIELDS_MESSAGE = "제목과 내용을 모두 입력해주세요."
DELETE_CONFIRM_MESSAGE = "정말 삭제하시겠습니까?"


class NoticeboardError(Exception):
    """공지 게시판 기본 예외"""


class ValidationError(NoticeboardError):
    """입력값 검증 실패 (사용자 경고 대상)"""


def deny_all(message):
    return False


@dataclass
class FormState:
    title: str = ""
    content: str = ""
    author: str = ""


@dataclass
class BoardScreen:
    listing: ListView
    detail: DetailView
    search_term: str = ""
    form: FormState = field(default_factory=FormState)
    mode: str = MODE_CREATE
    submit_label: str = SUBMIT_LABELS[MODE_CREATE]
    focus: Optional[str] = None

    @property
    def count(self):
        return self.listing.count

    def to_dict(self):
        data = asdict(self)
        data["count"] = self.count
        return data


@dataclass
class SubmitResult:
    created: bool
    record: Optional[Announcement]


class EditSession:
    def __init__(self, store, confirm=deny_all, clock=datetime.now,
                 default_author=DEFAULT_AUTHOR):
        self.store = store
        self.confirm = confirm
        self.clock = clock
        self.default_author = default_author
        self.editing_id = None
        self.screen = BoardScreen(listing=render_list([]), detail=detail_prompt())

    @property
    def mode(self):
        return MODE_CREATE if self.editing_id is None else MODE_EDIT

    def start(self):
        self.clear_focus()
        self.store.load()
        self.refresh()
        return self.screen

    # ── 화면 갱신 ──

    def refresh(self, records=None):
        """목록 다시 그리기. records가 없으면 전체 목록."""
        if records is None:
            records = self.store.records
        self.screen.listing = render_list(records)
        if self.screen.listing.is_empty:
            self.screen.detail = detail_prompt()
        return self.screen.listing

    def clear_focus(self):
        """화면 이동 지시는 해당 동작의 응답에만 실린다."""
        self.screen.focus = None

    def _set_mode(self, editing_id):
        self.editing_id = editing_id
        self.screen.mode = self.mode
        self.screen.submit_label = SUBMIT_LABELS[self.mode]

    def _after_mutation(self):
        self.store.persist()
        self.refresh()
        self.screen.search_term = ""

    # ── 사용자 동작 ──

    def submit(self, title, content, author=""):
        self.clear_focus()
        title = (title or "").strip()
        content = (content or "").strip()
        author = (author or "").strip() or self.default_author

        if not title or not content:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        now = self.clock()
        if self.editing_id is not None:
            record = self.store.update(self.editing_id, title, content, author, now=now)
            if record is not None:
                logger.info("Announcement updated: id=%s", record.id)
            self._set_mode(None)
            created = False
        else:
            record = Announcement(
                id=self.store.next_id(now),
                title=title,
                content=content,
                author=author,
                date=format_datetime(now),
            )
            self.store.add(record)
            logger.info("Announcement created: id=%s", record.id)
            created = True

        self._after_mutation()
        self.screen.form = FormState()
        self.screen.focus = "detail"
        return SubmitResult(created=created, record=record)

    def begin_edit(self, record_id):
        self.clear_focus()
        record = self.store.find_by_id(record_id)
        if record is None:
            return False
        self.screen.form = FormState(title=record.title, content=record.content, author=record.author)
        self._set_mode(record_id)
        self.screen.focus = "form"
        return True

    def cancel_edit(self):
        self.clear_focus()
        self._set_mode(None)
        self.screen.form = FormState()

    def view(self, record_id):
        self.clear_focus()
        record = self.store.find_by_id(record_id)
        self.screen.detail = render_detail(record)
        if record is not None:
            self.screen.focus = "detail"
        return self.screen.detail

    def delete(self, record_id, confirm=None):
        """confirm을 넘기면 세션 기본 확인 함수 대신 사용한다."""
        self.clear_focus()
        confirm = confirm or self.confirm
        if not confirm(DELETE_CONFIRM_MESSAGE):
            return False
        removed = self.store.remove(record_id)
        if removed:
            logger.info("Announcement deleted: id=%s", record_id)
        self._after_mutation()
        return removed

    def search(self, term):
        self.clear_focus()
        self.screen.search_term = term or ""
        return self.refresh(filter_announcements(self.store.records, term))
