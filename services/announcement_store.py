"""공지사항 저장 서비스.

AnnouncementRepository: 전체 목록을 저장소 키 하나에 JSON으로 읽고 쓴다.
AnnouncementStore: 메모리상의 정렬된 목록과 CRUD 연산.
"""
import json
import logging
import time
from datetime import datetime

from models import Announcement, format_datetime, parse_datetime

logger = logging.getLogger(__name__)

STORAGE_KEY = "militaryAnnouncements"


def sort_newest_first(records):
    """date 내림차순 정렬 (안정 정렬, 해석 불가한 날짜는 맨 뒤)."""
    return sorted(
        records,
        key=lambda r: parse_datetime(r.date) or datetime.min,
        reverse=True,
    )


class AnnouncementRepository:
    def __init__(self, storage, key=STORAGE_KEY):
        self.storage = storage
        self.key = key

    def load(self):
        """저장된 공지 목록을 최신순으로 반환한다. 어떤 경우에도 예외를 던지지 않는다."""
        try:
            raw = self.storage.get_item(self.key)
        except Exception as exc:
            logger.error("Failed to read announcements from storage: %s", exc)
            return []
        if raw is None:
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("stored announcements must be a list")
            records = [Announcement.from_dict(item) for item in data]
        except ValueError as exc:
            # json.JSONDecodeError 도 ValueError 하위 클래스
            logger.error("Failed to parse announcements from storage: %s", exc)
            return []

        return sort_newest_first(records)

    def save(self, records):
        """전체 목록을 직렬화해서 같은 키에 덮어쓴다. 실패는 호출자에게 전파된다."""
        blob = json.dumps([r.to_dict() for r in records], ensure_ascii=False)
        self.storage.set_item(self.key, blob)


class AnnouncementStore:
    def __init__(self, repository):
        self.repository = repository
        self.records = []

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def load(self):
        self.records = self.repository.load()
        logger.info("Loaded %d announcements", len(self.records))
        return self.records

    def persist(self):
        self.repository.save(self.records)

    def ids(self):
        return {r.id for r in self.records}

    def next_id(self, now=None):
        """생성 시각(ms) 기반 id. 기존 id와 겹치면 1씩 올린다."""
        if now is None:
            candidate = time.time_ns() // 1_000_000
        else:
            candidate = int(now.timestamp() * 1000)
        taken = self.ids()
        while candidate in taken:
            candidate += 1
        return candidate

    def add(self, record):
        self.records.insert(0, record)
        return record

    def find_by_id(self, record_id):
        for record in self.records:
            if record.id == record_id:
                return record
        return None

    def update(self, record_id, title, content, author, now=None):
        record = self.find_by_id(record_id)
        if record is None:
            logger.info("Update skipped, announcement %s not found", record_id)
            return None
        record.title = title
        record.content = content
        record.author = author
        record.date = format_datetime(now or datetime.now())
        return record

    def remove(self, record_id):
        before = len(self.records)
        self.records = [r for r in self.records if r.id != record_id]
        return len(self.records) != before
