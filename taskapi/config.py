"""
Default settings. Override with TASKAPI_* environment variables,
e.g. TASKAPI_PORT=8080 or TASKAPI_SECRET_KEY=...
"""


class Config:
    HOST = "127.0.0.1"
    PORT = 3000

    # Required; signs the session cookie.
    SECRET_KEY = None

    SESSION_COOKIE_NAME = "m294-session"
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = False
    SESSION_TTL_SECONDS = None
