from __future__ import annotations

import secrets
from datetime import timedelta
from typing import Optional

from flask import Flask
from flask.sessions import SessionInterface, SessionMixin
from werkzeug.datastructures import CallbackDict

from ..common.datetime_utils import now_local
from ..core.constants import SESSION_ID_BYTES
from .repository import SessionRepository


def new_sid() -> str:
    return secrets.token_urlsafe(SESSION_ID_BYTES)


class ServerSideSession(CallbackDict, SessionMixin):
    """Session data kept in the sessions table; the cookie only carries the sid."""

    def __init__(self, initial=None, sid: str = "", new: bool = False):
        def on_update(self):
            self.modified = True

        super().__init__(initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False
        self.replaced_sid: Optional[str] = None

    def regenerate(self) -> None:
        """Switch to a fresh sid; the old row is dropped when the response is saved.

        Call on every privilege change (login) so a sid known before
        authentication never becomes an authenticated one.
        """
        if not self.new and self.replaced_sid is None:
            self.replaced_sid = self.sid
        self.sid = new_sid()
        self.new = True
        self.modified = True


class ServerSideSessionInterface(SessionInterface):
    def __init__(self, store: SessionRepository):
        self._store = store

    def open_session(self, app: Flask, request) -> ServerSideSession:
        sid = request.cookies.get(self.get_cookie_name(app))
        if sid:
            stored = self._store.get(sid)
            if stored and stored.expires_at > now_local():
                return ServerSideSession(stored.data, sid=sid)
            if stored:
                self._store.delete(sid)
        return ServerSideSession(sid=new_sid(), new=True)

    def save_session(self, app: Flask, session: ServerSideSession, response) -> None:
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if session.replaced_sid:
            self._store.delete(session.replaced_sid)

        if not session:
            if session.modified:
                self._store.delete(session.sid)
                response.delete_cookie(name, domain=domain, path=path)
            return

        if not self.should_set_cookie(app, session):
            return

        lifetime: timedelta = app.permanent_session_lifetime
        self._store.save(session.sid, dict(session), now_local() + lifetime)
        cookie_expires = self.get_expiration_time(app, session)
        response.set_cookie(
            name,
            session.sid,
            expires=cookie_expires,
            httponly=self.get_cookie_httponly(app),
            domain=domain,
            path=path,
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
        )
