def filter_announcements(records, term):
    """제목 부분일치 검색 (대소문자 무시).

    검색어가 비어 있으면 records 자체를 그대로 돌려준다 (전체 보기).
    """
    needle = (term or "").strip().lower()
    if not needle:
        return records
    return [r for r in records if needle in r.title.lower()]
