from types import SimpleNamespace

from app.core.auth_context import AuthContext, AuthToken, CallableContext


def _request(**state):
    return SimpleNamespace(state=SimpleNamespace(**state))


def test_from_request_with_attached_identity():
    ctx = AuthContext.from_request(_request(auth=AuthToken(uid="user-1")))
    assert ctx.is_authenticated
    assert ctx.uid == "user-1"


def test_from_request_without_auth_attribute():
    ctx = AuthContext.from_request(_request())
    assert not ctx.is_authenticated
    assert ctx.uid is None


def test_from_callable_context():
    ctx = AuthContext.from_callable_context(CallableContext(auth=AuthToken(uid="user-2")))
    assert ctx.uid == "user-2"


def test_missing_callable_context_is_unauthenticated():
    assert not AuthContext.from_callable_context(None).is_authenticated
    assert not AuthContext.from_callable_context(CallableContext()).is_authenticated


def test_empty_uid_is_unauthenticated():
    assert not AuthContext.from_auth_token(AuthToken(uid="")).is_authenticated
