"""
Cookie session backed by a server-side SessionStore.

The cookie only carries a random token signed with the app's secret key;
the identity itself lives in the store.
"""

import logging
import secrets

from flask.sessions import SessionInterface, SessionMixin
from itsdangerous import BadSignature, Signer
from werkzeug.datastructures import CallbackDict

logger = logging.getLogger(__name__)


class ServerSession(CallbackDict, SessionMixin):
    def __init__(self, initial=None, token=None):
        def on_update(self):
            self.modified = True

        super().__init__(initial, on_update)
        self.token = token
        self.modified = False
        self.destroyed = False

    def destroy(self):
        self.clear()
        self.destroyed = True


class StoreSessionInterface(SessionInterface):
    salt = "taskapi-session"
    identity_key = "email"

    def __init__(self, store):
        self.store = store

    def _signer(self, app):
        return Signer(app.secret_key, salt=self.salt)

    def open_session(self, app, request):
        if not app.secret_key:
            return None
        signed = request.cookies.get(self.get_cookie_name(app))
        if not signed:
            return ServerSession()
        try:
            token = self._signer(app).unsign(signed).decode("utf-8")
        except BadSignature:
            logger.warning("Rejected session cookie with a bad signature")
            return ServerSession()
        identity = self.store.get(token)
        if identity is None:
            return ServerSession()
        return ServerSession({self.identity_key: identity}, token=token)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)
        identity = session.get(self.identity_key)

        if session.destroyed or (session.modified and identity is None):
            if session.token:
                self.store.destroy(session.token)
            response.delete_cookie(name, domain=domain, path=path)
            return

        if not session.modified:
            return

        token = session.token or secrets.token_urlsafe(32)
        session.token = token
        self.store.set(token, identity)
        response.set_cookie(
            name,
            self._signer(app).sign(token).decode("utf-8"),
            expires=self.get_expiration_time(app, session),
            httponly=self.get_cookie_httponly(app),
            domain=domain,
            path=path,
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
        )
