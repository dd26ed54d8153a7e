"""Tests for the title search filter."""

from models import Announcement
from services.search import filter_announcements


def _records():
    return [
        Announcement(3, "Briefing Schedule", "c", "a", "2026-03-03 00:00:00"),
        Announcement(2, "야간 훈련", "c", "a", "2026-03-02 00:00:00"),
        Announcement(1, "Morning briefing", "c", "a", "2026-03-01 00:00:00"),
    ]


def test_empty_term_returns_same_list():
    records = _records()
    assert filter_announcements(records, "") is records
    assert filter_announcements(records, "   ") is records
    assert filter_announcements(records, None) is records


def test_case_insensitive_substring_keeps_order():
    result = filter_announcements(_records(), "  BRIEF ")
    assert [r.id for r in result] == [3, 1]


def test_matches_title_only():
    assert filter_announcements(_records(), "c") == [_records()[0]]


def test_korean_term():
    assert [r.id for r in filter_announcements(_records(), "훈련")] == [2]


def test_no_match():
    assert filter_announcements(_records(), "없는제목") == []
