"""공지사항 블루프린트 — 게시판 화면 + 등록/수정/보기/삭제/검색 API."""

import logging
import threading

from flask import Blueprint, current_app, jsonify, render_template, request

from routes.utils import parse_confirmed
from services.announcement_store import AnnouncementRepository, AnnouncementStore
from services.edit_session import EditSession, ValidationError
from services.storage import LocalStorage

logger = logging.getLogger(__name__)

notice_bp = Blueprint("notice", __name__)

EXTENSION_KEY = "notice_board"


class NoticeBoard:
    """앱 하나에 세션 하나 (단일 사용자). 요청 처리는 lock으로 직렬화한다."""

    def __init__(self, storage, storage_key, default_author):
        self.storage = storage
        self.store = AnnouncementStore(AnnouncementRepository(storage, key=storage_key))
        self.session = EditSession(self.store, default_author=default_author)
        self.lock = threading.Lock()


def init_notice_board(app, storage=None):
    """저장소를 열고 저장된 공지를 불러와 app.extensions에 등록한다."""
    if storage is None:
        storage = LocalStorage(app.config["STORAGE_PATH"])
    board = NoticeBoard(
        storage,
        storage_key=app.config["STORAGE_KEY"],
        default_author=app.config["DEFAULT_AUTHOR"],
    )
    board.session.start()
    app.extensions[EXTENSION_KEY] = board
    return board


def get_board(app=None):
    return (app or current_app).extensions[EXTENSION_KEY]


def _screen_response(board, status=200, **extra):
    payload = {"success": status < 400, "screen": board.session.screen.to_dict()}
    payload.update(extra)
    return jsonify(payload), status


# ── 화면 ──


@notice_bp.route("/")
def index():
    board = get_board()
    with board.lock:
        return render_template("index.html", screen=board.session.screen)


# ── API ──


@notice_bp.route("/api/notices")
def list_notices():
    board = get_board()
    with board.lock:
        if "q" in request.args:
            board.session.search(request.args.get("q", ""))
        else:
            board.session.clear_focus()
        return _screen_response(board)


@notice_bp.route("/api/notices", methods=["POST"])
def submit_notice():
    board = get_board()
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"success": False, "error": "JSON body required"}), 400

    with board.lock:
        try:
            result = board.session.submit(
                str(data.get("title") or ""),
                str(data.get("content") or ""),
                str(data.get("author") or ""),
            )
        except ValidationError as exc:
            return _screen_response(board, 400, error=str(exc))

        notice = result.record.to_dict() if result.record else None
        return _screen_response(board, 201 if result.created else 200,
                                created=result.created, notice=notice)


@notice_bp.route("/api/notices/<int:notice_id>")
def view_notice(notice_id):
    board = get_board()
    with board.lock:
        detail = board.session.view(notice_id)
        if not detail.found:
            return _screen_response(board, 404, error=detail.message)
        return _screen_response(board)


@notice_bp.route("/api/notices/<int:notice_id>/edit", methods=["POST"])
def edit_notice(notice_id):
    board = get_board()
    with board.lock:
        if not board.session.begin_edit(notice_id):
            return _screen_response(board, 404, error="공지를 찾을 수 없습니다.")
        return _screen_response(board)


@notice_bp.route("/api/notices/edit/cancel", methods=["POST"])
def cancel_edit():
    board = get_board()
    with board.lock:
        board.session.cancel_edit()
        return _screen_response(board)


@notice_bp.route("/api/notices/<int:notice_id>", methods=["DELETE"])
def delete_notice(notice_id):
    board = get_board()
    confirmed = parse_confirmed(request)

    with board.lock:
        deleted = board.session.delete(notice_id, confirm=lambda message: confirmed)
        if not confirmed:
            logger.info("Notice delete declined: id=%s", notice_id)
        return _screen_response(board, deleted=deleted)
