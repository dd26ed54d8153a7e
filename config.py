import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

class Config:
    """기본 설정 (모든 환경 공통)"""
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # ── 공지 저장소 ──
    # 환경변수 NOTICE_STORAGE_PATH가 있으면 사용, 없으면 data/ 아래 JSON 파일
    STORAGE_PATH = os.environ.get(
        'NOTICE_STORAGE_PATH',
        os.path.join(BASE_DIR, 'data', 'local_storage.json')
    )
    STORAGE_KEY = 'militaryAnnouncements'   # 공지 목록이 저장되는 키
    DEFAULT_AUTHOR = 'Anonymous'            # 작성자 미입력 시 표시값

    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB 제한 (공지 본문은 짧은 텍스트)

    # 세션 보안 기본 설정 (오버라이딩 가능)
    SESSION_COOKIE_HTTPONLY = True  # 자바스크립트에서 쿠키 접근 차단 (XSS 방지)
    SESSION_COOKIE_SAMESITE = 'Lax' # CSRF 방지

    # 로깅 설정
    @staticmethod
    def get_logging_config(log_dir):
        return {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': '[%(asctime)s] %(levelname)s in %(module)s: %(message)s',
                }
            },
            'handlers': {
                'file': {
                    'class': 'logging.handlers.RotatingFileHandler',
                    'filename': os.path.join(log_dir, 'noticeboard.log'),
                    'maxBytes': 1024 * 1024 * 10, # 10MB
                    'backupCount': 5,
                    'formatter': 'default',
                    'encoding': 'utf-8'
                },
                'console': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'default'
                }
            },
            'root': {
                'level': 'INFO',
                'handlers': ['file', 'console']
            }
        }

class DevelopmentConfig(Config):
    """개발 환경 설정"""
    DEBUG = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-secret')
    SESSION_COOKIE_SECURE = False  # 개발 환경(HTTP)에서는 False

class TestingConfig(DevelopmentConfig):
    """테스트 환경 설정"""
    TESTING = True
    WTF_CSRF_ENABLED = False

class ProductionConfig(Config):
    """운영 환경 설정"""
    DEBUG = False
    SESSION_COOKIE_SECURE = True   # 운영 환경(HTTPS)에서는 True

    # 운영 환경 필수값 검증
    def __init__(self):
        if not self.SECRET_KEY:
            raise RuntimeError("SECRET_KEY environment variable is not set")

# 환경 변수에 따라 설정 클래스 선택
config_by_name = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
