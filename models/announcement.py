from dataclasses import dataclass
from datetime import datetime

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_AUTHOR = "Anonymous"

FIELDS = ("id", "title", "content", "author", "date")


def format_datetime(value):
    """datetime → 'YYYY-MM-DD HH:MM:SS' (로컬 시간 기준)"""
    return value.strftime(DATE_FORMAT)


def parse_datetime(value):
    """표시용 날짜 문자열 파싱. 형식이 맞지 않으면 None."""
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except (TypeError, ValueError):
        return None


@dataclass
class Announcement:
    id: int
    title: str
    content: str
    author: str = DEFAULT_AUTHOR
    date: str = ""

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "author": self.author,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data):
        """저장소에서 읽은 객체 하나를 복원한다.

        필드가 빠졌거나 타입이 맞지 않으면 ValueError.
        """
        if not isinstance(data, dict):
            raise ValueError(f"announcement entry must be an object, got {type(data).__name__}")
        missing = [name for name in FIELDS if name not in data]
        if missing:
            raise ValueError(f"announcement entry missing fields: {', '.join(missing)}")

        record_id = data["id"]
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise ValueError(f"announcement id must be an integer: {record_id!r}")
        for name in ("title", "content", "author", "date"):
            if not isinstance(data[name], str):
                raise ValueError(f"announcement {name} must be text")

        return cls(
            id=record_id,
            title=data["title"],
            content=data["content"],
            author=data["author"],
            date=data["date"],
        )
