"""서비스 계층 — 저장소, 검색, 화면 뷰모델, 등록/수정 세션"""
