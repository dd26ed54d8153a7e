"""routes 패키지 — Blueprint 중앙 등록"""


def register_blueprints(app):
    from routes.notice import notice_bp

    app.register_blueprint(notice_bp)
