"""목록/상세 화면 뷰모델.

렌더링 기술(Jinja 템플릿, JSON API)과 무관한 순수 변환 함수만 둔다.
"""
from dataclasses import asdict, dataclass, field
from typing import Optional

EMPTY_LIST_MESSAGE = "등록된 공지가 없습니다."
DETAIL_PROMPT = "목록에서 공지를 선택하여 자세한 내용을 확인하세요."
NOT_FOUND_MESSAGE = "선택하신 공지사항을 찾을 수 없습니다."

ROW_ACTIONS = ("view", "edit", "delete")
ACTION_LABELS = {"view": "보기", "edit": "수정", "delete": "삭제"}


@dataclass
class RowAction:
    name: str
    label: str
    target_id: int


@dataclass
class ListRow:
    id: int
    number_label: str
    title: str
    author: str
    date: str
    actions: list = field(default_factory=list)


@dataclass
class ListView:
    rows: list
    count: int
    empty_message: Optional[str] = None

    @property
    def is_empty(self):
        return not self.rows

    def to_dict(self):
        return asdict(self)


@dataclass
class DetailView:
    found: bool
    id: Optional[int] = None
    title: str = ""
    author: str = ""
    date: str = ""
    content: str = ""
    content_lines: list = field(default_factory=list)
    message: Optional[str] = None

    def to_dict(self):
        return asdict(self)


def render_list(records):
    """번호는 넘겨받은 목록 안에서의 위치 기준: 첫 행이 No.{len}, 마지막 행이 No.1."""
    total = len(records)
    if total == 0:
        return ListView(rows=[], count=0, empty_message=EMPTY_LIST_MESSAGE)

    rows = []
    for index, record in enumerate(records):
        rows.append(ListRow(
            id=record.id,
            number_label=f"No.{total - index}",
            title=record.title,
            author=record.author,
            date=record.date,
            actions=[RowAction(name, ACTION_LABELS[name], record.id) for name in ROW_ACTIONS],
        ))
    return ListView(rows=rows, count=total)


def render_detail(record):
    if record is None:
        return DetailView(found=False, message=NOT_FOUND_MESSAGE)
    return DetailView(
        found=True,
        id=record.id,
        title=record.title,
        author=record.author,
        date=record.date,
        content=record.content,
        content_lines=record.content.splitlines(),
    )


def detail_prompt():
    return DetailView(found=False, message=DETAIL_PROMPT)
